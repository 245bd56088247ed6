"""Up/UpClean/Down/Status for the local Kind cluster."""

from ..callbacks import OutputCallback, SilentCallback
from ..config import KargoConfig, kubeconfig_path
from ..exceptions import KargoError, KargoOperationError, ToolNotInstalledError
from ..kind import (
    create_kind_cluster,
    delete_kind_cluster,
    export_kubeconfig,
    kind_cluster_exists,
    kind_installed,
)
from ..kubectl import get_cluster_info, get_node_status


def _validate_prerequisites(config: KargoConfig) -> None:
    if not kind_installed(config.tools.kind):
        raise ToolNotInstalledError("kind", f"please install kind or set tools.kind ({config.tools.kind})")


async def _cluster_exists(config: KargoConfig) -> bool:
    try:
        return await kind_cluster_exists(config.tools.kind, config.cluster_name)
    except KargoError as e:
        raise KargoOperationError("check existence of", f"cluster '{config.cluster_name}'", e) from e


async def _create(config: KargoConfig, callback: OutputCallback) -> None:
    name = config.cluster_name
    callback.progress(f"📦 Creating kind cluster '{name}'...")
    try:
        await create_kind_cluster(config.tools.kind, name)
    except KargoError as e:
        raise KargoOperationError("create", f"cluster '{name}'", e) from e
    callback.success(f"✅ Cluster '{name}' created successfully")


async def _export_kubeconfig(config: KargoConfig, callback: OutputCallback) -> None:
    name = config.cluster_name
    callback.progress(f"🔧 Exporting kubeconfig for cluster '{name}'...")
    try:
        await export_kubeconfig(config.tools.kind, name)
    except KargoError as e:
        raise KargoOperationError("export kubeconfig for", f"cluster '{name}'", e) from e
    callback.success(f"✅ Kind cluster '{name}' is ready!")


async def up(config: KargoConfig, callback: OutputCallback = None) -> None:
    """Create the cluster unless it exists, then (re-)export its kubeconfig."""
    if callback is None:
        callback = SilentCallback()

    callback.progress("🚀 Setting up kind cluster...")
    _validate_prerequisites(config)

    if await _cluster_exists(config):
        callback.success(f"✅ Cluster '{config.cluster_name}' already exists")
    else:
        await _create(config, callback)

    await _export_kubeconfig(config, callback)


async def up_clean(config: KargoConfig, callback: OutputCallback = None) -> None:
    """Delete the cluster if it exists and create it again."""
    if callback is None:
        callback = SilentCallback()

    callback.progress("🚀 Setting up kind cluster (clean recreation)...")
    _validate_prerequisites(config)

    name = config.cluster_name
    if await _cluster_exists(config):
        callback.progress(f"🔄 Deleting existing cluster '{name}'...")
        try:
            await delete_kind_cluster(config.tools.kind, name)
        except KargoError as e:
            raise KargoOperationError("delete existing", f"cluster '{name}'", e) from e
        callback.success(f"✅ Cluster '{name}' deleted successfully")

    await _create(config, callback)
    await _export_kubeconfig(config, callback)


async def down(config: KargoConfig, callback: OutputCallback = None) -> None:
    if callback is None:
        callback = SilentCallback()

    callback.progress("🔥 Tearing down kind cluster...")
    _validate_prerequisites(config)

    name = config.cluster_name
    if not await _cluster_exists(config):
        callback.progress(f"ℹ️  Cluster '{name}' does not exist")
        return

    callback.progress(f"🗑️  Deleting kind cluster '{name}'...")
    try:
        await delete_kind_cluster(config.tools.kind, name)
    except KargoError as e:
        raise KargoOperationError("delete", f"cluster '{name}'", e) from e
    callback.success(f"✅ Cluster '{name}' deleted successfully")


async def status(config: KargoConfig, callback: OutputCallback = None) -> bool:
    """Report on the cluster; returns whether it exists.

    Only the existence check can fail; connectivity and node problems are
    reported as warnings.
    """
    if callback is None:
        callback = SilentCallback()

    callback.progress("📊 Checking kind cluster status...")
    _validate_prerequisites(config)

    name = config.cluster_name
    if not await _cluster_exists(config):
        callback.progress(f"❌ Cluster '{name}' does not exist")
        return False

    callback.success(f"✅ Cluster '{name}' exists")
    callback.progress(f"🔧 Using kubeconfig {kubeconfig_path()}")

    callback.progress("🔍 Checking cluster connectivity...")
    try:
        info = await get_cluster_info(config.kind_context, config.tools.kubectl)
    except KargoError as e:
        callback.warning(f"⚠️  Could not connect to cluster: {e}")
        callback.progress("💡 Try running 'kargo kind up' to ensure kubeconfig is exported")
        return True

    callback.success(f"✅ Cluster is accessible:\n{info}")

    callback.progress("🖥️  Node status:")
    try:
        await get_node_status(config.kind_context, config.tools.kubectl)
    except KargoError as e:
        callback.warning(f"⚠️  Could not get node status: {e}")

    return True
