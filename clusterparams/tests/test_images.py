from __future__ import annotations

import pytest

from clusterparams.errors import UnknownImageKeyError
from clusterparams.models import (
    ImageCatalog,
    ImageTable,
    TargetEnvironment,
    default_image_catalog,
    get_target_env,
)

from conftest import UBUNTU_1804


def test_lookup_returns_entry(image_table: ImageTable) -> None:
    assert image_table.lookup("ubuntu-18.04") == UBUNTU_1804


def test_lookup_unknown_distro_raises(image_table: ImageTable) -> None:
    with pytest.raises(UnknownImageKeyError) as err:
        image_table.lookup("centos")
    assert err.value.key == "centos"
    assert "test" in str(err.value)


def test_catalog_unknown_environment_raises() -> None:
    with pytest.raises(UnknownImageKeyError):
        ImageCatalog().for_environment(TargetEnvironment.public)


def test_default_catalog_covers_every_environment() -> None:
    catalog = default_image_catalog()
    for env in TargetEnvironment:
        assert catalog.for_environment(env).lookup("ubuntu-18.04").publisher == "Canonical"


def test_azure_stack_has_no_flatcar() -> None:
    stack = default_image_catalog().for_environment(TargetEnvironment.stack)
    with pytest.raises(UnknownImageKeyError):
        stack.lookup("flatcar")


@pytest.mark.parametrize(
    "location,cloud_name,expected",
    [
        ("westus2", "", TargetEnvironment.public),
        ("chinaeast2", "", TargetEnvironment.china),
        ("germanycentral", "", TargetEnvironment.german),
        ("usgovvirginia", "", TargetEnvironment.us_government),
        ("local", "azurestackcloud", TargetEnvironment.stack),
        ("local", "SomethingElse", TargetEnvironment.public),
    ],
)
def test_get_target_env(
    location: str, cloud_name: str, expected: TargetEnvironment
) -> None:
    assert get_target_env(location, cloud_name) == expected
