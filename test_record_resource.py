#!/usr/bin/env python3
"""
Test suite for the Cloudflare record resource

This module tests name translation, validation, the lifecycle operations,
import and the state-file manager.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import Mock

import yaml

from cloudflare_records.cli.main import get_default_config, load_config, main
from cloudflare_records.core import record_resource
from cloudflare_records.core.record_manager import RecordManager
from cloudflare_records.core.record_translator import (
    apply_record,
    build_record,
    record_name,
    subdomain_name,
)
from cloudflare_records.core.resource_data import ResourceData
from cloudflare_records.core.schema import requires_replacement, validate_config
from cloudflare_records.core.zone_resolver import resolve_zone
from cloudflare_records.exceptions import (
    RECORD_NOT_FOUND_MESSAGE,
    ConfigurationError,
    ImportAmbiguityError,
    ImportFormatError,
    ProviderError,
    RecordImportError,
    RecordNotFoundError,
    ZoneNotFoundError,
    is_record_not_found,
)
from cloudflare_records.providers.dns_client import DNSClient
from cloudflare_records.providers.mock_provider import MockDNSProvider
from cloudflare_records.utils.validators import (
    validate_fqdn,
    validate_record_content,
    validate_record_type,
)

ZONE_ID = "023e105f4ecef8ad9ca31a8372d0c353"


def make_client():
    """Return a mock remote client that knows example.com."""
    client = Mock()
    client.get_zone_id.return_value = ZONE_ID
    client.get_record.return_value = {
        "id": "372e67954025e0ba6aaa6d586b9e0b59",
        "type": "A",
        "name": "www.example.com",
        "content": "192.0.2.10",
        "ttl": 1,
        "priority": None,
        "proxied": False,
        "zone_id": ZONE_ID,
    }
    return client


class TestRecordTranslator(unittest.TestCase):
    """Test name composition and field mapping."""

    def test_record_name_with_subdomain(self):
        self.assertEqual(record_name("www", "example.com"), "www.example.com")

    def test_record_name_without_subdomain(self):
        self.assertEqual(record_name("", "example.com"), "example.com")

    def test_subdomain_name(self):
        self.assertEqual(subdomain_name("www.example.com", "example.com"), "www")
        self.assertEqual(subdomain_name("example.com", "example.com"), "")
        self.assertEqual(subdomain_name("a.b.example.com", "example.com"), "a.b")

    def test_name_round_trip(self):
        """Composing then decomposing a name recovers the subdomain."""
        for subdomain in ["www", "api.v2", "_dmarc", "mail-1", ""]:
            with self.subTest(subdomain=subdomain):
                full_name = record_name(subdomain, "example.com")
                self.assertEqual(subdomain_name(full_name, "example.com"), subdomain)

    def test_build_record_required_fields(self):
        data = ResourceData({"domain": "example.com", "subdomain": "www", "type": "A", "value": "192.0.2.10"})

        record = build_record(data)

        self.assertEqual(record["type"], "A")
        self.assertEqual(record["name"], "www.example.com")
        self.assertEqual(record["content"], "192.0.2.10")
        self.assertEqual(record["zone_name"], "example.com")
        self.assertFalse(record["proxied"])
        self.assertNotIn("ttl", record)
        self.assertNotIn("priority", record)

    def test_build_record_optional_fields(self):
        data = ResourceData({
            "domain": "example.com",
            "type": "MX",
            "value": "mail.example.com",
            "ttl": 300,
            "priority": 10,
        })

        record = build_record(data)

        self.assertEqual(record["ttl"], 300)
        self.assertEqual(record["priority"], 10)

    def test_build_record_proxied_on_create(self):
        data = ResourceData({"domain": "example.com", "type": "A", "value": "192.0.2.10", "proxied": True})

        self.assertTrue(build_record(data)["proxied"])

    def test_build_record_proxied_defaults_false_on_update(self):
        data = ResourceData({"domain": "example.com", "type": "A", "value": "192.0.2.10"}, "abc")

        record = build_record(data, update=True)

        self.assertIs(record["proxied"], False)
        self.assertEqual(record["id"], "abc")

    def test_build_record_proxied_set_on_update(self):
        data = ResourceData({"domain": "example.com", "type": "A", "value": "192.0.2.10", "proxied": True}, "abc")

        self.assertTrue(build_record(data, update=True)["proxied"])

    def test_apply_record(self):
        data = ResourceData({"domain": "example.com", "type": "A", "value": "old"}, "abc")
        remote = {
            "id": "abc",
            "type": "A",
            "name": "www.example.com",
            "content": "192.0.2.20",
            "ttl": 120,
            "priority": None,
            "proxied": True,
        }

        apply_record(data, remote, ZONE_ID)

        self.assertEqual(data.id, "abc")
        self.assertEqual(data.get("subdomain"), "www")
        self.assertEqual(data.get("value"), "192.0.2.20")
        self.assertEqual(data.get("ttl"), 120)
        self.assertEqual(data.get("priority"), 0)
        self.assertTrue(data.get("proxied"))
        self.assertEqual(data.get("zone_id"), ZONE_ID)

    def test_apply_record_apex(self):
        data = ResourceData({"domain": "example.com", "subdomain": "old", "type": "A", "value": "x"})

        apply_record(data, {"id": "abc", "type": "A", "name": "example.com", "content": "192.0.2.1"}, ZONE_ID)

        self.assertEqual(data.get("subdomain"), "")


class TestValidators(unittest.TestCase):
    """Test record validation functions."""

    def test_validate_record_content_valid(self):
        valid = [
            ("A", "192.0.2.1"),
            ("AAAA", "2001:db8::1"),
            ("CNAME", "target.example.com"),
            ("MX", "mail.example.com"),
            ("NS", "ns1.example.com"),
            ("CNAME", "target.example.com."),
            ("TXT", "v=spf1 include:example.com ~all"),
            ("TXT", ""),
            ("CAA", '0 issue "letsencrypt.org"'),
        ]

        for record_type, content in valid:
            with self.subTest(record_type=record_type, content=content):
                is_valid, reason = validate_record_content(record_type, content)
                self.assertTrue(is_valid, reason)
                self.assertEqual(reason, "")

    def test_validate_record_content_invalid(self):
        invalid = [
            ("A", "256.1.2.3"),
            ("A", "2001:db8::1"),
            ("A", "example.com"),
            ("AAAA", "192.0.2.1"),
            ("CNAME", ""),
            ("CNAME", "bad host"),
            ("CNAME", "not a host name"),
            ("NS", "-ns.example.com"),
            ("MX", "mail..example.com"),
            ("CAA", "not a caa record"),
        ]

        for record_type, content in invalid:
            with self.subTest(record_type=record_type, content=content):
                is_valid, reason = validate_record_content(record_type, content)
                self.assertFalse(is_valid)
                self.assertTrue(reason)

    def test_validate_record_type(self):
        self.assertTrue(validate_record_type("A", True)[0])
        self.assertTrue(validate_record_type("CNAME", True)[0])
        self.assertTrue(validate_record_type("MX", False)[0])

        is_valid, reason = validate_record_type("MX", True)
        self.assertFalse(is_valid)
        self.assertIn("cannot be proxied", reason)

        is_valid, reason = validate_record_type("PTR", False)
        self.assertFalse(is_valid)
        self.assertIn("Invalid type", reason)

    def test_validate_fqdn(self):
        self.assertTrue(validate_fqdn("example.com"))
        self.assertTrue(validate_fqdn("1password.com"))
        self.assertFalse(validate_fqdn("example"))
        self.assertFalse(validate_fqdn("example.com."))
        self.assertFalse(validate_fqdn("-example.com"))


class TestResourceData(unittest.TestCase):
    """Test the local state holder."""

    def test_defaults(self):
        data = ResourceData()

        self.assertEqual(data.id, "")
        self.assertEqual(data.get("subdomain"), "")
        self.assertIs(data.get("proxied"), False)
        self.assertEqual(data.get("ttl"), 0)

    def test_get_ok_treats_zero_values_as_unset(self):
        data = ResourceData({"ttl": 0, "priority": None, "proxied": False, "value": "x"})

        self.assertEqual(data.get_ok("ttl"), (0, False))
        self.assertEqual(data.get_ok("priority"), (0, False))
        self.assertEqual(data.get_ok("proxied"), (False, False))
        self.assertEqual(data.get_ok("value"), ("x", True))

    def test_unknown_field(self):
        with self.assertRaises(KeyError):
            ResourceData({"bogus": 1})


class TestSchema(unittest.TestCase):
    """Test configuration validation against the schema."""

    def test_valid_config(self):
        config = {"domain": "example.com", "subdomain": "www", "type": "A", "value": "192.0.2.1", "ttl": 300}
        self.assertEqual(validate_config(config), [])

    def test_missing_required_field(self):
        with self.assertRaises(ConfigurationError) as ctx:
            validate_config({"domain": "example.com", "type": "A"})
        self.assertIn("value", str(ctx.exception))

    def test_computed_field_cannot_be_set(self):
        with self.assertRaises(ConfigurationError):
            validate_config({"domain": "example.com", "type": "A", "value": "192.0.2.1", "zone_id": "x"})

    def test_wrong_type(self):
        with self.assertRaises(ConfigurationError):
            validate_config({"domain": "example.com", "type": "A", "value": "192.0.2.1", "ttl": "300"})
        with self.assertRaises(ConfigurationError):
            validate_config({"domain": "example.com", "type": "A", "value": "192.0.2.1", "priority": True})

    def test_deprecated_name_field(self):
        config = {"domain": "example.com", "type": "A", "value": "192.0.2.1", "name": "www"}
        self.assertEqual(validate_config(config), ["name"])

    def test_requires_replacement(self):
        current = {"domain": "example.com", "type": "A", "value": "192.0.2.1"}

        self.assertEqual(requires_replacement(current, dict(current, value="192.0.2.2")), [])
        self.assertEqual(requires_replacement(current, dict(current, type="AAAA")), ["type"])
        self.assertEqual(requires_replacement(current, dict(current, domain="example.org")), ["domain"])


class TestZoneResolver(unittest.TestCase):
    """Test zone resolution."""

    def test_resolve_zone(self):
        client = make_client()
        self.assertEqual(resolve_zone(client, "example.com"), ZONE_ID)
        client.get_zone_id.assert_called_once_with("example.com")

    def test_resolve_zone_not_found(self):
        client = make_client()
        client.get_zone_id.side_effect = ZoneNotFoundError("Zone could not be found")

        with self.assertRaises(ZoneNotFoundError) as ctx:
            resolve_zone(client, "missing.com")
        self.assertIn('Error finding zone "missing.com"', str(ctx.exception))

    def test_resolve_zone_empty_id(self):
        client = make_client()
        client.get_zone_id.return_value = ""

        with self.assertRaises(ZoneNotFoundError):
            resolve_zone(client, "example.com")


class TestRecordResource(unittest.TestCase):
    """Test the lifecycle operations against a mock client."""

    def setUp(self):
        self.client = make_client()
        self.data = ResourceData({"domain": "example.com", "subdomain": "www", "type": "A", "value": "192.0.2.10"})

    def test_create(self):
        self.client.create_record.return_value = {"id": "372e67954025e0ba6aaa6d586b9e0b59"}

        record_resource.create(self.data, self.client)

        self.assertEqual(self.data.id, "372e67954025e0ba6aaa6d586b9e0b59")
        self.assertEqual(self.data.get("zone_id"), ZONE_ID)
        self.assertEqual(self.data.get("ttl"), 1)
        sent = self.client.create_record.call_args[0][1]
        self.assertEqual(sent["name"], "www.example.com")
        self.assertEqual(sent["zone_id"], ZONE_ID)
        self.client.get_record.assert_called_once_with(ZONE_ID, "372e67954025e0ba6aaa6d586b9e0b59")

    def test_create_empty_id_is_fatal(self):
        for response in [{"id": ""}, {}, None]:
            with self.subTest(response=response):
                self.client.create_record.return_value = response
                data = ResourceData({"domain": "example.com", "type": "A", "value": "192.0.2.10"})

                with self.assertRaises(ProviderError) as ctx:
                    record_resource.create(data, self.client)

                self.assertIn("record was empty", str(ctx.exception))
                self.assertEqual(data.id, "")

    def test_create_invalid_content_makes_no_remote_call(self):
        data = ResourceData({"domain": "example.com", "type": "A", "value": "not-an-ip"})

        with self.assertRaises(ConfigurationError):
            record_resource.create(data, self.client)

        self.client.get_zone_id.assert_not_called()
        self.client.create_record.assert_not_called()

    def test_create_proxied_mx_makes_no_remote_call(self):
        data = ResourceData({"domain": "example.com", "type": "MX", "value": "mail.example.com", "proxied": True})

        with self.assertRaises(ConfigurationError) as ctx:
            record_resource.create(data, self.client)

        self.assertIn("cannot be proxied", str(ctx.exception))
        self.client.create_record.assert_not_called()

    def test_create_zone_not_found(self):
        self.client.get_zone_id.side_effect = ZoneNotFoundError("Zone could not be found")

        with self.assertRaises(ZoneNotFoundError):
            record_resource.create(self.data, self.client)

        self.client.create_record.assert_not_called()

    def test_create_remote_failure(self):
        self.client.create_record.side_effect = ProviderError("81057: Record already exists.")

        with self.assertRaises(ProviderError) as ctx:
            record_resource.create(self.data, self.client)

        self.assertIn("Failed to create record", str(ctx.exception))

    def test_read(self):
        self.data.set_id("372e67954025e0ba6aaa6d586b9e0b59")

        record_resource.read(self.data, self.client)

        self.assertEqual(self.data.get("subdomain"), "www")
        self.assertEqual(self.data.get("value"), "192.0.2.10")
        self.assertEqual(self.data.get("zone_id"), ZONE_ID)

    def test_read_absent_record_clears_id(self):
        self.data.set_id("gone")
        self.client.get_record.side_effect = RecordNotFoundError(RECORD_NOT_FOUND_MESSAGE)

        record_resource.read(self.data, self.client)

        self.assertEqual(self.data.id, "")

    def test_read_matches_unclassified_not_found_message(self):
        self.data.set_id("gone")
        self.client.get_record.side_effect = ProviderError(f"81044: {RECORD_NOT_FOUND_MESSAGE}")

        record_resource.read(self.data, self.client)

        self.assertEqual(self.data.id, "")

    def test_read_other_error_is_surfaced(self):
        self.data.set_id("abc")
        self.client.get_record.side_effect = ProviderError("10000: Authentication error")

        with self.assertRaises(ProviderError):
            record_resource.read(self.data, self.client)

        self.assertEqual(self.data.id, "abc")

    def test_update(self):
        self.data.set_id("372e67954025e0ba6aaa6d586b9e0b59")
        self.data.set("value", "192.0.2.10")

        record_resource.update(self.data, self.client)

        zone_id, record_id, sent = self.client.update_record.call_args[0]
        self.assertEqual(zone_id, ZONE_ID)
        self.assertEqual(record_id, "372e67954025e0ba6aaa6d586b9e0b59")
        self.assertIs(sent["proxied"], False)
        self.client.get_record.assert_called_once()

    def test_update_failure(self):
        self.data.set_id("abc")
        self.client.update_record.side_effect = ProviderError("1004: DNS Validation Error")

        with self.assertRaises(ProviderError) as ctx:
            record_resource.update(self.data, self.client)

        self.assertIn("Failed to update Cloudflare record", str(ctx.exception))

    def test_delete(self):
        self.data.set_id("abc")

        record_resource.delete(self.data, self.client)

        self.client.delete_record.assert_called_once_with(ZONE_ID, "abc")
        self.assertEqual(self.data.id, "")

    def test_delete_is_idempotent(self):
        self.data.set_id("gone")
        self.client.delete_record.side_effect = RecordNotFoundError(RECORD_NOT_FOUND_MESSAGE)

        record_resource.delete(self.data, self.client)

        self.assertEqual(self.data.id, "")

    def test_delete_other_error_keeps_record(self):
        self.data.set_id("abc")
        self.client.delete_record.side_effect = ProviderError("10000: Authentication error")

        with self.assertRaises(ProviderError):
            record_resource.delete(self.data, self.client)

        self.assertEqual(self.data.id, "abc")

    def test_is_record_not_found(self):
        self.assertTrue(is_record_not_found(RecordNotFoundError("anything")))
        self.assertTrue(is_record_not_found(Exception(f"81044: {RECORD_NOT_FOUND_MESSAGE}")))
        self.assertFalse(is_record_not_found(ProviderError("10000: Authentication error")))


class TestImport(unittest.TestCase):
    """Test adopting existing records."""

    def setUp(self):
        self.client = make_client()

    def test_import_bad_identifier(self):
        for identifier in ["a|b", "a|b|c|d", "www.example.com"]:
            with self.subTest(identifier=identifier):
                with self.assertRaises(ImportFormatError):
                    record_resource.import_record(ResourceData(resource_id=identifier), self.client)

        self.client.get_zone_id.assert_not_called()

    def test_import_requires_single_match(self):
        for matches in [[], [{"id": "a"}, {"id": "b"}]]:
            with self.subTest(count=len(matches)):
                self.client.list_records.return_value = matches
                data = ResourceData(resource_id="www|example.com|A")

                with self.assertRaises(ImportAmbiguityError) as ctx:
                    record_resource.import_record(data, self.client)

                self.assertIn(f"got {len(matches)}", str(ctx.exception))

    def test_import_single_match(self):
        self.client.list_records.return_value = [{"id": "372e67954025e0ba6aaa6d586b9e0b59"}]
        data = ResourceData(resource_id="www|example.com|A")

        result = record_resource.import_record(data, self.client)

        self.assertEqual(result, [data])
        self.assertEqual(data.id, "372e67954025e0ba6aaa6d586b9e0b59")
        self.assertEqual(data.get("domain"), "example.com")
        self.assertEqual(data.get("subdomain"), "www")
        self.assertEqual(data.get("value"), "192.0.2.10")
        self.client.list_records.assert_called_once_with(
            ZONE_ID, {"name": "www.example.com", "type": "A"}
        )

    def test_import_apex_record(self):
        self.client.list_records.return_value = [{"id": "abc"}]

        record_resource.import_record(ResourceData(resource_id="|example.com|A"), self.client)

        self.client.list_records.assert_called_once_with(ZONE_ID, {"name": "example.com", "type": "A"})

    def test_import_read_failure(self):
        self.client.list_records.return_value = [{"id": "abc"}]
        self.client.get_record.side_effect = ProviderError("10000: Authentication error")

        with self.assertRaises(RecordImportError) as ctx:
            record_resource.import_record(ResourceData(resource_id="www|example.com|A"), self.client)

        self.assertIn("error importing record", str(ctx.exception))


class TestRecordManager(unittest.TestCase):
    """Test the state-file manager against the mock provider."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.state_file = os.path.join(self.temp_dir, "state.yaml")
        self.config = {
            "dns_providers": {"mock": {"zones": {"example.com": ZONE_ID}}},
            "default_provider": "mock",
        }
        self.manager = RecordManager(self.config)
        self.provider = self.manager.dns_client.provider
        self.record_config = {
            "domain": "example.com",
            "subdomain": "www",
            "type": "A",
            "value": "192.0.2.10",
        }

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_manager_initialization(self):
        self.assertIsInstance(self.manager.dns_client, DNSClient)
        self.assertIsInstance(self.provider, MockDNSProvider)

    def test_apply_creates_record(self):
        data = self.manager.apply(self.record_config, self.state_file)

        self.assertTrue(data.id)
        self.assertEqual(len(self.provider.records[ZONE_ID]), 1)
        with open(self.state_file) as f:
            state = yaml.safe_load(f)
        self.assertEqual(state["id"], data.id)
        self.assertEqual(state["attributes"]["zone_id"], ZONE_ID)
        self.assertEqual(state["attributes"]["ttl"], 1)

    def test_apply_without_changes(self):
        created = self.manager.apply(self.record_config, self.state_file)

        plan = self.manager.plan(self.manager.load_state(self.state_file), self.record_config)
        again = self.manager.apply(self.record_config, self.state_file)

        self.assertEqual(plan["action"], "none")
        self.assertEqual(again.id, created.id)

    def test_apply_updates_in_place(self):
        created = self.manager.apply(self.record_config, self.state_file)

        updated = self.manager.apply(dict(self.record_config, value="192.0.2.20"), self.state_file)

        self.assertEqual(updated.id, created.id)
        self.assertEqual(self.provider.records[ZONE_ID][created.id]["content"], "192.0.2.20")
        self.assertEqual(updated.get("ttl"), 1)

    def test_apply_replaces_on_type_change(self):
        created = self.manager.apply(self.record_config, self.state_file)

        replaced = self.manager.apply(
            dict(self.record_config, type="AAAA", value="2001:db8::1"), self.state_file
        )

        self.assertNotEqual(replaced.id, created.id)
        self.assertNotIn(created.id, self.provider.records[ZONE_ID])
        self.assertEqual(len(self.provider.records[ZONE_ID]), 1)

    def test_failed_replace_keeps_existing_record(self):
        created = self.manager.apply(self.record_config, self.state_file)

        with self.assertRaises(ConfigurationError):
            self.manager.apply(dict(self.record_config, type="AAAA", value="not-an-ip"), self.state_file)

        self.assertIn(created.id, self.provider.records[ZONE_ID])
        state = self.manager.load_state(self.state_file)
        self.assertEqual(state.id, created.id)
        self.assertEqual(state.get("type"), "A")

    def test_apply_without_changes_saves_refreshed_state(self):
        created = self.manager.apply(self.record_config, self.state_file)
        self.provider.records[ZONE_ID][created.id]["ttl"] = 300

        self.manager.apply(self.record_config, self.state_file)

        self.assertEqual(self.manager.load_state(self.state_file).get("ttl"), 300)

    def test_apply_recreates_missing_record(self):
        created = self.manager.apply(self.record_config, self.state_file)
        del self.provider.records[ZONE_ID][created.id]

        recreated = self.manager.apply(self.record_config, self.state_file)

        self.assertNotEqual(recreated.id, created.id)

    def test_apply_invalid_config(self):
        with self.assertRaises(ConfigurationError):
            self.manager.apply({"domain": "example.com", "type": "A"}, self.state_file)
        self.assertFalse(os.path.exists(self.state_file))

    def test_refresh_drops_missing_record(self):
        created = self.manager.apply(self.record_config, self.state_file)
        del self.provider.records[ZONE_ID][created.id]

        self.assertIsNone(self.manager.refresh(self.state_file))
        self.assertFalse(os.path.exists(self.state_file))

    def test_destroy(self):
        self.manager.apply(self.record_config, self.state_file)

        self.assertTrue(self.manager.destroy(self.state_file))
        self.assertEqual(self.provider.records[ZONE_ID], {})
        self.assertFalse(os.path.exists(self.state_file))
        self.assertFalse(self.manager.destroy(self.state_file))

    def test_import(self):
        stored = self.provider.create_record(
            ZONE_ID, {"type": "A", "name": "www.example.com", "content": "192.0.2.30"}
        )

        data = self.manager.import_record("www|example.com|A", self.state_file)

        self.assertEqual(data.id, stored["id"])
        self.assertEqual(self.manager.load_state(self.state_file).get("value"), "192.0.2.30")

    def test_import_into_tracked_state(self):
        self.manager.apply(self.record_config, self.state_file)

        with self.assertRaises(ValueError):
            self.manager.import_record("www|example.com|A", self.state_file)


class TestCLI(unittest.TestCase):
    """Test the command-line entry point."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, "config.yaml")
        self.record_file = os.path.join(self.temp_dir, "www.yaml")
        self.state_file = os.path.join(self.temp_dir, "state.yaml")

        with open(self.config_file, "w") as f:
            yaml.dump({"dns_providers": {"mock": {"zones": {"example.com": ZONE_ID}}}, "default_provider": "mock"}, f)

        with open(self.record_file, "w") as f:
            yaml.dump({"domain": "example.com", "subdomain": "www", "type": "A", "value": "192.0.2.10"}, f)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def run_cli(self, *args):
        with self.assertRaises(SystemExit) as ctx:
            main(["--config", self.config_file, "--state", self.state_file, *args])
        return ctx.exception.code

    def test_apply(self):
        self.assertEqual(self.run_cli("apply", "-f", self.record_file), 0)
        self.assertTrue(os.path.exists(self.state_file))

    def test_apply_missing_record_file(self):
        self.assertEqual(self.run_cli("apply", "-f", os.path.join(self.temp_dir, "missing.yaml")), 1)

    def test_bad_import_identifier(self):
        self.assertEqual(self.run_cli("import", "a|b"), 1)
        self.assertFalse(os.path.exists(self.state_file))

    def test_load_config_defaults(self):
        config = load_config(os.path.join(self.temp_dir, "missing.yaml"))
        self.assertEqual(config, get_default_config())
        self.assertEqual(config["default_provider"], "mock")


if __name__ == "__main__":
    unittest.main(verbosity=2)
