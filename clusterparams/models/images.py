"""
clusterparams/models/images.py

Read-only VM image tables:
 - OSImage: offer / sku / publisher / version of a marketplace image
 - ImageTable: distro -> OSImage for one cloud environment
 - ImageCatalog: target environment -> ImageTable

Missing entries are hard errors. The engine never substitutes a default image.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from clusterparams.errors import UnknownImageKeyError
from clusterparams.models.environments import TargetEnvironment


class OSImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    offer: str
    sku: str
    publisher: str
    version: str


class ImageTable(BaseModel):
    """Images available in one cloud, keyed by distro name.

    Attributes:
        name: Label for error messages, usually the target environment.
        images: Mapping of distro (e.g. 'ubuntu-18.04') to its image.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    images: Dict[str, OSImage] = Field(default_factory=dict)

    def lookup(self, distro: str) -> OSImage:
        """
        Return the image for `distro`.

        Raises:
            UnknownImageKeyError: If the table has no entry for `distro`.
        """
        image = self.images.get(distro)
        if image is None:
            raise UnknownImageKeyError(distro, self.name)
        return image


class ImageCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    tables: Dict[TargetEnvironment, ImageTable] = Field(default_factory=dict)

    def for_environment(self, env: TargetEnvironment) -> ImageTable:
        table = self.tables.get(env)
        if table is None:
            raise UnknownImageKeyError(env.value)
        return table


# ----------------------------------------------------------------------
# Default catalog
# ----------------------------------------------------------------------

UBUNTU_1604 = OSImage(
    publisher="Canonical", offer="UbuntuServer", sku="16.04-LTS", version="16.04.202106110"
)
UBUNTU_1804 = OSImage(
    publisher="Canonical", offer="UbuntuServer", sku="18.04-LTS", version="18.04.202106220"
)
UBUNTU_1804_GEN2 = OSImage(
    publisher="Canonical",
    offer="UbuntuServer",
    sku="18_04-lts-gen2",
    version="18.04.202106220",
)
AKS_UBUNTU_1604 = OSImage(
    publisher="microsoft-aks",
    offer="aks",
    sku="aks-engine-ubuntu-1604-202007",
    version="2021.06.22",
)
AKS_UBUNTU_1804 = OSImage(
    publisher="microsoft-aks",
    offer="aks",
    sku="aks-engine-ubuntu-1804-202007",
    version="2021.06.22",
)
FLATCAR = OSImage(
    publisher="kinvolk",
    offer="flatcar-container-linux-free",
    sku="stable",
    version="2905.2.5",
)
ACC_1604 = OSImage(
    publisher="Canonical",
    offer="confidential-compute-preview",
    sku="16.04-LTS",
    version="latest",
)

_AZURE_IMAGES: Dict[str, OSImage] = {
    "ubuntu": UBUNTU_1604,
    "ubuntu-18.04": UBUNTU_1804,
    "ubuntu-18.04-gen2": UBUNTU_1804_GEN2,
    "aks-ubuntu-16.04": AKS_UBUNTU_1604,
    "aks-ubuntu-18.04": AKS_UBUNTU_1804,
    "flatcar": FLATCAR,
    "acc-16.04": ACC_1604,
}

# Azure Stack hubs only syndicate the Ubuntu images
_AZURE_STACK_IMAGES: Dict[str, OSImage] = {
    "ubuntu": UBUNTU_1604,
    "ubuntu-18.04": UBUNTU_1804,
    "aks-ubuntu-16.04": AKS_UBUNTU_1604,
    "aks-ubuntu-18.04": AKS_UBUNTU_1804,
}


def default_image_catalog() -> ImageCatalog:
    """The image catalog used when the caller does not inject a table."""
    tables = {
        env: ImageTable(
            name=env.value,
            images=(
                _AZURE_STACK_IMAGES
                if env == TargetEnvironment.stack
                else _AZURE_IMAGES
            ),
        )
        for env in TargetEnvironment
    }
    return ImageCatalog(tables=tables)


__all__ = ["OSImage", "ImageTable", "ImageCatalog", "default_image_catalog"]
