"""Steps shared by the helm-installed add-ons."""

from typing import Optional, Sequence

from ..callbacks import OutputCallback
from ..config import KargoConfig
from ..exceptions import KargoError, KargoOperationError, ToolNotInstalledError
from ..helm import helm_installed, helm_release_status, install_helm_chart, release_exists, upgrade_helm_chart
from ..kubectl import create_namespace, delete_namespace, get_resources, namespace_exists
from ..readiness import wait_for_namespace_deleted


def validate_helm(config: KargoConfig) -> None:
    if not helm_installed(config.tools.helm):
        raise ToolNotInstalledError("helm", f"please install helm or set tools.helm ({config.tools.helm})")


async def ensure_namespace(config: KargoConfig, namespace: str, callback: OutputCallback) -> None:
    if not await create_namespace(namespace, config.tools.kubectl):
        callback.progress(f"ℹ️  Namespace '{namespace}' might already exist")


async def install_or_upgrade(
    config: KargoConfig,
    display_name: str,
    release: str,
    chart: str,
    namespace: str,
    version: str,
    values: Sequence[str],
    callback: OutputCallback,
) -> None:
    """Upgrade ``release`` if helm knows it, install it otherwise."""
    helm = config.tools.helm
    if await release_exists(release, namespace, helm):
        callback.progress(f"🔄 {display_name} is already installed, upgrading to {version}...")
        try:
            await upgrade_helm_chart(release, chart, namespace, version, values, helm)
        except KargoError as e:
            raise KargoOperationError("upgrade", display_name, e) from e
        callback.success(f"✅ {display_name} upgraded to {version} and is ready")
    else:
        callback.progress(f"📦 Installing {display_name} {version}...")
        try:
            await install_helm_chart(release, chart, namespace, version, values, helm)
        except KargoError as e:
            raise KargoOperationError("install", display_name, e) from e
        callback.success(f"✅ {display_name} {version} is ready in namespace '{namespace}'")


async def remove_namespace(config: KargoConfig, namespace: str, callback: OutputCallback) -> None:
    """Delete a namespace and wait for it to disappear."""
    kubectl = config.tools.kubectl
    if not await namespace_exists(namespace, kubectl):
        callback.progress(f"ℹ️  Namespace '{namespace}' does not exist")
        return

    callback.progress(f"🗑️  Deleting namespace '{namespace}'...")
    await delete_namespace(namespace, kubectl)
    await wait_for_namespace_deleted(namespace, kubectl, callback)


async def show_release_status(config: KargoConfig, release: str, namespace: str, callback: OutputCallback) -> None:
    callback.progress("🔍 Helm release status:")
    try:
        await helm_release_status(release, namespace, config.tools.helm)
    except KargoError as e:
        callback.warning(f"⚠️  Could not get helm status: {e}")


async def show_resources(
    config: KargoConfig,
    heading: str,
    resource: str,
    label: str,
    namespace: Optional[str],
    selector: str,
    callback: OutputCallback,
) -> None:
    callback.progress(heading)
    try:
        output = await get_resources(resource, namespace, selector, config.tools.kubectl)
    except KargoError as e:
        callback.warning(f"⚠️  Could not get {label} status: {e}")
        return
    callback.progress(output)
