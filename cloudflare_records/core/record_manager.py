"""
Record Manager - Drive the record resource against a local state file

This module keeps one record resource's state in a YAML file and decides
whether applying a configuration creates, updates or replaces the remote
record, the way a provisioning host would.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..providers.dns_client import DNSClient
from . import record_resource
from .resource_data import ResourceData
from .schema import RECORD_SCHEMA, SCHEMA_VERSION, requires_replacement, validate_config

console = Console()
logger = logging.getLogger(__name__)


class RecordManager:
    """Applies record configurations and keeps the state file in sync."""

    def __init__(self, config: Dict, dns_client: Optional[DNSClient] = None):
        """Initialize the record manager with configuration."""
        self.config = config
        self.dns_client = dns_client or DNSClient(config)

    def load_state(self, state_path: str) -> Optional[ResourceData]:
        """Load resource state from a YAML file, or None if there is none."""
        path = Path(state_path)
        if not path.exists():
            return None

        with open(path, "r") as f:
            state = yaml.safe_load(f) or {}

        version = state.get("schema_version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            logger.warning(
                f"State file {state_path} has schema version {version}, expected {SCHEMA_VERSION}"
            )

        return ResourceData(state.get("attributes") or {}, state.get("id", ""))

    def save_state(self, state_path: str, data: ResourceData):
        """Write resource state to a YAML file."""
        state = {
            "schema_version": SCHEMA_VERSION,
            "id": data.id,
            "attributes": data.to_dict(),
        }
        with open(state_path, "w") as f:
            yaml.safe_dump(state, f, default_flow_style=False, sort_keys=True)
        logger.info(f"State saved to {state_path}")

    def plan(self, state: Optional[ResourceData], record_config: Dict) -> Dict:
        """
        Work out what applying a configuration would do.

        Returns:
            Dictionary with the action ("create", "update", "replace" or
            "none") and the changed fields as (current, desired) pairs
        """
        if state is None or not state.id:
            return {"action": "create", "changes": {}}

        current = state.to_dict()
        replace_fields = requires_replacement(current, record_config)
        if replace_fields:
            changes = {key: (current.get(key), record_config.get(key)) for key in replace_fields}
            return {"action": "replace", "changes": changes}

        desired = ResourceData(record_config)
        changes = {}
        for key, field in RECORD_SCHEMA.items():
            if "deprecated" in field or not (field.get("required") or field.get("optional")):
                continue
            if field.get("computed") and key not in record_config:
                continue
            if desired.get(key) != state.get(key):
                changes[key] = (state.get(key), desired.get(key))

        return {"action": "update" if changes else "none", "changes": changes}

    def apply(self, record_config: Dict, state_path: str) -> ResourceData:
        """Create, update or replace the record to match the configuration."""
        validate_config(record_config)

        state = self.load_state(state_path)
        if state is not None and state.id:
            record_resource.read(state, self.dns_client)
            if not state.id:
                logger.warning("Record disappeared from the provider, it will be created again")

        plan = self.plan(state, record_config)
        self._display_plan(plan)

        action = plan["action"]
        if action == "none":
            console.print("[green]No changes required - record is up to date[/green]")
            self.save_state(state_path, state)
            return state

        if action in ("create", "replace"):
            data = ResourceData(record_config)
            # The old record must survive a configuration that cannot be created
            record_resource.validate(data)
            if action == "replace":
                record_resource.delete(state, self.dns_client)
            record_resource.create(data, self.dns_client)
        else:
            data = ResourceData(record_config, state.id)
            data.set("zone_id", state.get("zone_id"))
            if "ttl" not in record_config:
                data.set("ttl", state.get("ttl"))
            record_resource.update(data, self.dns_client)

        self.save_state(state_path, data)
        console.print(f"[green]Record {action}d: {data.id}[/green]")
        return data

    def refresh(self, state_path: str) -> Optional[ResourceData]:
        """Re-read the record and update the state file."""
        state = self.load_state(state_path)
        if state is None or not state.id:
            console.print("[yellow]No record in state[/yellow]")
            return None

        record_resource.read(state, self.dns_client)
        if not state.id:
            console.print("[yellow]Record no longer exists, removing from state[/yellow]")
            Path(state_path).unlink()
            return None

        self.save_state(state_path, state)
        return state

    def destroy(self, state_path: str) -> bool:
        """Delete the record and remove the state file."""
        state = self.load_state(state_path)
        if state is None or not state.id:
            console.print("[yellow]No record in state, nothing to destroy[/yellow]")
            return False

        record_resource.delete(state, self.dns_client)
        Path(state_path).unlink()
        console.print("[green]Record destroyed[/green]")
        return True

    def import_record(self, identifier: str, state_path: str) -> ResourceData:
        """Adopt an existing record and write its state."""
        state = self.load_state(state_path)
        if state is not None and state.id:
            raise ValueError(f"State file {state_path} already tracks record {state.id}")

        data = ResourceData(resource_id=identifier)
        imported = record_resource.import_record(data, self.dns_client)[0]
        self.save_state(state_path, imported)
        console.print(f"[green]Record imported: {imported.id}[/green]")
        return imported

    def display_state(self, data: Optional[ResourceData]):
        """Display the tracked record."""
        if data is None or not data.id:
            console.print("[yellow]No record in state[/yellow]")
            return

        table = Table(title=f"Cloudflare Record {data.id}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        for key, value in data.to_dict().items():
            table.add_row(key, str(value))

        console.print(table)

    def _display_plan(self, plan: Dict):
        """Display a summary of planned changes."""
        if not plan["changes"]:
            if plan["action"] == "create":
                console.print("[green]Record will be created[/green]")
            return

        table = Table(title=f"Record changes ({plan['action']})")
        table.add_column("Field", style="cyan")
        table.add_column("Current", style="magenta")
        table.add_column("Desired", style="white")

        for key, (current, desired) in plan["changes"].items():
            table.add_row(key, str(current), str(desired))

        console.print(table)
