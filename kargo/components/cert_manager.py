"""Up/UpClean/Down/Status for cert-manager."""

from ..callbacks import OutputCallback, SilentCallback
from ..config import KargoConfig
from ..exceptions import KargoError, KargoOperationError
from ..helm import release_exists, uninstall_helm_chart
from ..kubectl import delete_api_services, delete_crds
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

NAME = "cert-manager"


async def up(config: KargoConfig, callback: OutputCallback = None, ensure_cluster: bool = True) -> None:
    """Install cert-manager, or upgrade it in place when already installed."""
    if callback is None:
        callback = SilentCallback()

    if ensure_cluster:
        await cluster.up(config, callback)

    callback.progress("🔐 Setting up cert-manager...")
    validate_helm(config)

    settings = config.cert_manager
    await ensure_namespace(config, settings.namespace, callback)
    await install_or_upgrade(
        config,
        NAME,
        settings.release,
        settings.chart,
        settings.namespace,
        settings.version,
        settings.values,
        callback,
    )


async def down(config: KargoConfig, callback: OutputCallback = None, delete_namespace: bool = False) -> None:
    """Uninstall cert-manager and remove the CRDs and API services it leaves behind."""
    if callback is None:
        callback = SilentCallback()

    callback.progress("🔥 Tearing down cert-manager...")
    validate_helm(config)

    settings = config.cert_manager
    kubectl = config.tools.kubectl
    if not await release_exists(settings.release, settings.namespace, config.tools.helm):
        callback.progress("ℹ️  cert-manager is not installed")
        return

    try:
        await uninstall_helm_chart(settings.release, settings.namespace, config.tools.helm)
    except KargoError as e:
        raise KargoOperationError("uninstall", NAME, e) from e

    # helm leaves CRDs behind on uninstall
    callback.progress("🧹 Cleaning up cert-manager CRDs...")
    if not await delete_crds(settings.crds, kubectl):
        callback.warning("⚠️  Could not delete all cert-manager CRDs")
    if not await delete_api_services(settings.api_services, kubectl):
        callback.warning("⚠️  Could not delete cert-manager API services")

    if delete_namespace:
        try:
            await remove_namespace(config, settings.namespace, callback)
        except KargoError as e:
            raise KargoOperationError("delete namespace of", NAME, e) from e

    callback.success("✅ cert-manager torn down successfully")


async def up_clean(config: KargoConfig, callback: OutputCallback = None, settle_delay: float = SETTLE_DELAY) -> None:
    """Uninstall cert-manager and install it again from scratch."""
    if callback is None:
        callback = SilentCallback()

    callback.progress("🧹 Clean setting up cert-manager...")

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
    callback.success("✅ cert-manager clean setup completed successfully")


async def status(config: KargoConfig, callback: OutputCallback = None) -> bool:
    """Report on the cert-manager release; returns whether it is installed."""
    if callback is None:
        callback = SilentCallback()

    callback.progress("📊 Checking cert-manager status...")
    validate_helm(config)

    settings = config.cert_manager
    if not await release_exists(settings.release, settings.namespace, config.tools.helm):
        callback.progress("❌ cert-manager is not installed")
        return False

    callback.success("✅ cert-manager helm release exists")
    await show_release_status(config, settings.release, settings.namespace, callback)
    await show_resources(
        config,
        "🔍 Checking cert-manager pods...",
        "pods",
        "pod",
        settings.namespace,
        f"app.kubernetes.io/instance={settings.release}",
        callback,
    )
    await show_resources(
        config,
        "🔍 Checking cert-manager CRDs...",
        "crd",
        "CRD",
        None,
        "app.kubernetes.io/name=cert-manager",
        callback,
    )
    return True
