"""Up/UpClean/Down/Status for Argo CD."""

from ..argo import get_argocd_admin_password
from ..callbacks import OutputCallback, SilentCallback
from ..config import KargoConfig
from ..exceptions import KargoError, KargoOperationError
from ..helm import ensure_helm_repo, release_exists, uninstall_helm_chart, update_helm_repos
from . import cluster
from .recreate import SETTLE_DELAY, delete_then_recreate
from .release import (
    ensure_namespace,
    install_or_upgrade,
    remove_namespace,
    show_release_status,
    show_resources,
    validate_helm,
)

NAME = "ArgoCD"
PART_OF_SELECTOR = "app.kubernetes.io/part-of=argocd"


async def up(config: KargoConfig, callback: OutputCallback = None, ensure_cluster: bool = True) -> None:
    """Install Argo CD from its helm repository, or upgrade an existing release."""
    if callback is None:
        callback = SilentCallback()

    if ensure_cluster:
        await cluster.up(config, callback)

    callback.progress("🚀 Setting up ArgoCD...")
    validate_helm(config)

    settings = config.argocd
    helm = config.tools.helm
    callback.progress(f"📦 Ensuring helm repository '{settings.repo_name}' is available...")
    try:
        await ensure_helm_repo(settings.repo_name, settings.repo_url, helm)
        await update_helm_repos(helm)
    except KargoError as e:
        raise KargoOperationError("prepare helm repository for", NAME, e) from e

    await ensure_namespace(config, settings.namespace, callback)
    await install_or_upgrade(
        config,
        NAME,
        settings.release,
        settings.chart_ref,
        settings.namespace,
        settings.version,
        (),
        callback,
    )


async def down(config: KargoConfig, callback: OutputCallback = None, delete_namespace: bool = False) -> None:
    if callback is None:
        callback = SilentCallback()

    callback.progress("🔥 Tearing down ArgoCD...")
    validate_helm(config)

    settings = config.argocd
    if not await release_exists(settings.release, settings.namespace, config.tools.helm):
        callback.progress("ℹ️  ArgoCD is not installed")
        return

    try:
        await uninstall_helm_chart(settings.release, settings.namespace, config.tools.helm)
    except KargoError as e:
        raise KargoOperationError("uninstall", NAME, e) from e

    if delete_namespace:
        try:
            await remove_namespace(config, settings.namespace, callback)
        except KargoError as e:
            raise KargoOperationError("delete namespace of", NAME, e) from e

    callback.success("✅ ArgoCD torn down successfully")


async def up_clean(config: KargoConfig, callback: OutputCallback = None, settle_delay: float = SETTLE_DELAY) -> None:
    if callback is None:
        callback = SilentCallback()

    callback.progress("🧹 Clean setting up ArgoCD...")

    async def _down():
        try:
            await down(config, callback)
        except KargoError as e:
            raise KargoOperationError("uninstall existing", NAME, e) from e

    async def _up():
        try:
            await up(config, callback)
        except KargoError as e:
            raise KargoOperationError("reinstall", NAME, e) from e

    await delete_then_recreate(_down, _up, settle_delay, callback)
    callback.success("✅ ArgoCD clean setup completed successfully")


async def status(config: KargoConfig, callback: OutputCallback = None) -> bool:
    if callback is None:
        callback = SilentCallback()

    callback.progress("📊 Checking ArgoCD status...")
    validate_helm(config)

    settings = config.argocd
    if not await release_exists(settings.release, settings.namespace, config.tools.helm):
        callback.progress("❌ ArgoCD is not installed")
        return False

    callback.success("✅ ArgoCD helm release exists")
    await show_release_status(config, settings.release, settings.namespace, callback)
    await show_resources(
        config, "🔍 Checking ArgoCD pods...", "pods", "pod", settings.namespace, PART_OF_SELECTOR, callback
    )
    await show_resources(
        config, "🔍 Checking ArgoCD services...", "svc", "service", settings.namespace, PART_OF_SELECTOR, callback
    )
    return True


async def admin_password(config: KargoConfig) -> str:
    try:
        return await get_argocd_admin_password(config.argocd.namespace, config.tools.kubectl)
    except KargoError as e:
        raise KargoOperationError("read the admin password of", NAME, e) from e
