# clusterparams/models/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """
    Defaults applied when a cluster description leaves a Windows field empty.
    Fields map to environment variables prefixed with `CLUSTERPARAMS_`,
    e.g. `CLUSTERPARAMS_DEFAULT_WINDOWS_SKU`.
    """

    default_windows_sku: str = "Datacenter-Core-1809-with-Containers-smalldisk"
    default_windows_docker_version: str = "19.03.14"
    # "process" isolation unless the pool asks for hyperv
    default_containerd_runtime_handler: str = "process"

    model_config = SettingsConfigDict(env_prefix="CLUSTERPARAMS_")
