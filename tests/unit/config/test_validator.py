"""Tests for cluster definition validation."""

from typing import Any

import pytest
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from akshelper.config.validator import (
    field_errors_from_pydantic,
    loc_to_namespace,
    namespace_segment,
    validate_cluster_definition,
)
from akshelper.lib.errors import (
    ClusterValidationError,
    TranslationError,
    UnrecognizedFieldPathError,
)
from akshelper.lib.validation import FieldError
from akshelper.models.cluster import ClusterDefinition


class SampleModel(BaseModel):
    """Simple test model for error conversion testing."""

    vm_size: str = Field(min_length=1, alias="vmSize")
    ports: list[int] = Field(default_factory=list)


class TestNamespaceSegment:
    """Tests for namespace_segment()."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("properties", "Properties"),
            ("masterProfile", "MasterProfile"),
            ("master_profile", "MasterProfile"),
            ("agentPoolProfiles", "AgentPoolProfiles"),
            ("dnsPrefix", "DNSPrefix"),
            ("dns_prefix", "DNSPrefix"),
            ("vmSize", "VMSize"),
            ("osDiskSizeGB", "OSDiskSizeGB"),
            ("os_disk_size_gb", "OSDiskSizeGB"),
            ("ipAddressCount", "IPAddressCount"),
            ("diskSizesGB", "DiskSizesGB"),
            ("clientId", "ClientID"),
            ("adminPassword", "AdminPassword"),
        ],
    )
    def test_segments(self, key: str, expected: str) -> None:
        """Test field names and aliases map to schema names."""
        assert namespace_segment(key) == expected


class TestLocToNamespace:
    """Tests for loc_to_namespace()."""

    def test_nested_path(self) -> None:
        """Test a nested location becomes a dotted path."""
        loc = ("properties", "masterProfile", "count")
        assert loc_to_namespace(loc) == "Properties.MasterProfile.Count"

    def test_list_indices(self) -> None:
        """Test list indices attach to the preceding segment."""
        loc = ("properties", "agentPoolProfiles", 2, "ports", 0)
        assert loc_to_namespace(loc) == "Properties.AgentPoolProfiles[2].Ports[0]"

    def test_empty_location(self) -> None:
        """Test an empty location yields a placeholder."""
        assert loc_to_namespace(()) == "unknown"


class TestFieldErrorsFromPydantic:
    """Tests for field_errors_from_pydantic()."""

    def test_converts_each_error(self) -> None:
        """Test each pydantic error becomes a FieldError in order."""
        with pytest.raises(PydanticValidationError) as exc_info:
            SampleModel.model_validate({"vmSize": "", "ports": ["x"]})

        errors = field_errors_from_pydantic(exc_info.value)

        assert [e.namespace for e in errors] == ["VMSize", "Ports[0]"]
        assert errors[0].value == ""
        assert errors[0].kind == "string_too_short"
        assert errors[1].value == "x"

    def test_returns_field_errors(self) -> None:
        """Test the result holds FieldError instances."""
        with pytest.raises(PydanticValidationError) as exc_info:
            SampleModel.model_validate({})
        errors = field_errors_from_pydantic(exc_info.value)
        assert all(isinstance(e, FieldError) for e in errors)
        assert errors[0].kind == "missing"


class TestValidateClusterDefinition:
    """Tests for validate_cluster_definition()."""

    def test_valid_definition(self, cluster_definition: dict[str, Any]) -> None:
        """Test a valid definition returns the parsed model."""
        definition = validate_cluster_definition(cluster_definition)

        assert isinstance(definition, ClusterDefinition)
        master = definition.properties.master_profile
        assert master.dns_prefix == "mycluster"
        assert definition.properties.agent_pool_profiles[0].count == 3

    def test_missing_master_profile(self, cluster_definition: dict[str, Any]) -> None:
        """Test a missing master profile is reported by path."""
        del cluster_definition["properties"]["masterProfile"]

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert str(exc_info.value) == "missing Properties.MasterProfile"
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)

    def test_empty_dns_prefix(self, cluster_definition: dict[str, Any]) -> None:
        """Test an empty DNS prefix is reported as missing."""
        cluster_definition["properties"]["masterProfile"]["dnsPrefix"] = ""

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == "missing Properties.MasterProfile.DNSPrefix"

    def test_invalid_master_count(self, cluster_definition: dict[str, Any]) -> None:
        """Test an even master count is rejected."""
        cluster_definition["properties"]["masterProfile"]["count"] = 2

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == "MasterProfile count needs to be 1, 3, or 5"

    def test_master_os_disk_too_large(self, cluster_definition: dict[str, Any]) -> None:
        """Test the offending disk size appears in the message."""
        cluster_definition["properties"]["masterProfile"]["osDiskSizeGB"] = 2000

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == (
            "Invalid os disk size of 2000 specified.  The range of valid values "
            "are [1, 1023]"
        )

    def test_master_os_disk_not_a_number(
        self, cluster_definition: dict[str, Any]
    ) -> None:
        """Test an unparsable disk size fails translation explicitly."""
        cluster_definition["properties"]["masterProfile"]["osDiskSizeGB"] = "big"

        with pytest.raises(TranslationError):
            validate_cluster_definition(cluster_definition)

    def test_boolean_master_count(self, cluster_definition: dict[str, Any]) -> None:
        """Test a boolean master count is rejected, not read as 1."""
        cluster_definition["properties"]["masterProfile"]["count"] = True

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == "MasterProfile count needs to be 1, 3, or 5"

    @pytest.mark.parametrize("size", ["500", "2000", 2000.0, 500.0])
    def test_agent_os_disk_size_must_be_an_integer(
        self, cluster_definition: dict[str, Any], size: Any
    ) -> None:
        """Test numeric strings and floats fail translation whatever their value."""
        pool = cluster_definition["properties"]["agentPoolProfiles"][0]
        pool["osDiskSizeGB"] = size

        with pytest.raises(TranslationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.namespace == (
            "Properties.AgentPoolProfiles[0].OSDiskSizeGB"
        )

    def test_master_os_disk_float(self, cluster_definition: dict[str, Any]) -> None:
        """Test a float master disk size is not coerced."""
        cluster_definition["properties"]["masterProfile"]["osDiskSizeGB"] = 2000.0

        with pytest.raises(TranslationError):
            validate_cluster_definition(cluster_definition)

    def test_string_agent_count(self, cluster_definition: dict[str, Any]) -> None:
        """Test a numeric string agent count gets the count message."""
        cluster_definition["properties"]["agentPoolProfiles"][0]["count"] = "3"

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == (
            "AgentPoolProfile count needs to be in the range [1,1000]"
        )

    def test_master_storage_profile(self, cluster_definition: dict[str, Any]) -> None:
        """Test an unknown master storage profile."""
        cluster_definition["properties"]["masterProfile"]["storageProfile"] = "Ephemeral"

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == (
            "Unknown storageProfile 'Ephemeral'. "
            "Specify either StorageAccount or ManagedDisks"
        )

    def test_agent_pool_count(self, cluster_definition: dict[str, Any]) -> None:
        """Test an agent pool count of zero in the second pool."""
        pools = cluster_definition["properties"]["agentPoolProfiles"]
        pools.append({"name": "pool2", "count": 0, "vmSize": "Standard_D2_v3"})

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.namespace == "Properties.AgentPoolProfiles[1].Count"
        assert exc_info.value.message == (
            "AgentPoolProfile count needs to be in the range [1,1000]"
        )

    def test_agent_pool_ports(self, cluster_definition: dict[str, Any]) -> None:
        """Test an out of range agent pool port."""
        cluster_definition["properties"]["agentPoolProfiles"][0]["ports"] = [80, 70000]

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.namespace == "Properties.AgentPoolProfiles[0].Ports[1]"
        assert exc_info.value.message == (
            "AgentPoolProfile Ports must be in the range[1, 65535]"
        )

    def test_agent_pool_ephemeral_storage(
        self, cluster_definition: dict[str, Any]
    ) -> None:
        """Test agent pools accept the Ephemeral storage profile."""
        pool = cluster_definition["properties"]["agentPoolProfiles"][0]
        pool["storageProfile"] = "Ephemeral"

        definition = validate_cluster_definition(cluster_definition)

        assert definition.properties.agent_pool_profiles[0].storage_profile == (
            "Ephemeral"
        )

    def test_agent_pool_too_many_disks(self, cluster_definition: dict[str, Any]) -> None:
        """Test more than the maximum number of data disks."""
        pool = cluster_definition["properties"]["agentPoolProfiles"][0]
        pool["diskSizesGB"] = [128, 128, 128, 128, 128]

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message.startswith("A maximum of 4 disks")

    def test_missing_windows_password(self, cluster_definition: dict[str, Any]) -> None:
        """Test a Windows profile without a password."""
        cluster_definition["properties"]["windowsProfile"] = {
            "adminUsername": "azureuser"
        }

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == (
            "missing Properties.WindowsProfile.AdminPassword"
        )

    def test_missing_client_id(self, cluster_definition: dict[str, Any]) -> None:
        """Test a service principal without a client ID."""
        del cluster_definition["properties"]["servicePrincipalProfile"]["clientId"]

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.message == (
            "missing Properties.ServicePrincipalProfile.ClientID"
        )

    def test_first_failure_only(self, cluster_definition: dict[str, Any]) -> None:
        """Characterization: only the first of several failures is reported."""
        cluster_definition["properties"]["masterProfile"]["count"] = 4
        cluster_definition["properties"]["agentPoolProfiles"][0]["count"] = 0

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.namespace == "Properties.MasterProfile.Count"

    def test_missing_properties_is_unrecognized(self) -> None:
        """Test a document without properties falls back to the generic message."""
        with pytest.raises(UnrecognizedFieldPathError) as exc_info:
            validate_cluster_definition({"apiVersion": "vlabs"})

        assert exc_info.value.message.startswith("Namespace Properties is not caught")

    def test_invalid_dns_prefix_format(self, cluster_definition: dict[str, Any]) -> None:
        """Test the DNS prefix format is checked after the schema."""
        cluster_definition["properties"]["masterProfile"]["dnsPrefix"] = "1-bad"

        with pytest.raises(ClusterValidationError) as exc_info:
            validate_cluster_definition(cluster_definition)

        assert exc_info.value.namespace == "Properties.MasterProfile.DNSPrefix"
        assert "DNSPrefix '1-bad' is invalid" in exc_info.value.message
        assert "(length was 5)" in exc_info.value.message
