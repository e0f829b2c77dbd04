"""
clusterparams/models/environments.py

Maps a cluster's location and custom cloud name to the Azure environment it
deploys into, and each environment to its VM DNS suffix.
"""

from enum import Enum
from typing import Dict


class TargetEnvironment(str, Enum):
    public = "AzurePublicCloud"
    china = "AzureChinaCloud"
    german = "AzureGermanCloud"
    us_government = "AzureUSGovernmentCloud"
    stack = "AzureStackCloud"


_REGION_ENVIRONMENTS: Dict[str, TargetEnvironment] = {
    "chinaeast": TargetEnvironment.china,
    "chinanorth": TargetEnvironment.china,
    "chinaeast2": TargetEnvironment.china,
    "chinanorth2": TargetEnvironment.china,
    "germanycentral": TargetEnvironment.german,
    "germanynortheast": TargetEnvironment.german,
    "usgovvirginia": TargetEnvironment.us_government,
    "usgoviowa": TargetEnvironment.us_government,
    "usgovarizona": TargetEnvironment.us_government,
    "usgovtexas": TargetEnvironment.us_government,
}

VM_DNS_SUFFIXES: Dict[TargetEnvironment, str] = {
    TargetEnvironment.public: "cloudapp.azure.com",
    TargetEnvironment.china: "cloudapp.chinacloudapi.cn",
    TargetEnvironment.german: "cloudapp.microsoftazure.de",
    TargetEnvironment.us_government: "cloudapp.usgovcloudapi.net",
    # Azure Stack instances always carry their own suffix in the cloud profile
    TargetEnvironment.stack: "",
}


def get_target_env(location: str, custom_cloud_name: str) -> TargetEnvironment:
    """
    Resolve the target environment. Sovereign-cloud regions win over the
    custom cloud name, which only matters for Azure Stack.
    """
    env = _REGION_ENVIRONMENTS.get(location.lower())
    if env is not None:
        return env
    if custom_cloud_name.lower() == TargetEnvironment.stack.value.lower():
        return TargetEnvironment.stack
    return TargetEnvironment.public


__all__ = ["TargetEnvironment", "VM_DNS_SUFFIXES", "get_target_env"]
