#!/usr/bin/env python3
"""
Cloudflare Records - Demo Script

This script walks one record through its lifecycle using the mock provider
for safe testing and demonstration.
"""

import os
import tempfile

from rich.console import Console
from rich.panel import Panel

from cloudflare_records.core.record_manager import RecordManager

console = Console()

DEMO_ZONE = "example.com"


def create_demo_config():
    """Create a demo configuration using the mock provider."""
    return {
        "dns_providers": {"mock": {"zones": {DEMO_ZONE: "023e105f4ecef8ad9ca31a8372d0c353"}}},
        "default_provider": "mock",
    }


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]Cloudflare Records - Demo[/bold blue]\n"
            f"[cyan]Record lifecycle in {DEMO_ZONE}[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def run_lifecycle_demo(manager, state_file):
    """Create, update, replace and destroy a record."""
    record = {"domain": DEMO_ZONE, "subdomain": "www", "type": "A", "value": "192.0.2.10"}

    console.print("[bold]1. Creating www.example.com[/bold]")
    manager.display_state(manager.apply(record, state_file))

    console.print("\n[bold]2. Changing its address[/bold]")
    record["value"] = "192.0.2.20"
    manager.display_state(manager.apply(record, state_file))

    console.print("\n[bold]3. Switching it to IPv6 (forces a new record)[/bold]")
    record.update(type="AAAA", value="2001:db8::20")
    manager.display_state(manager.apply(record, state_file))

    console.print("\n[bold]4. Destroying it twice[/bold]")
    manager.destroy(state_file)
    manager.destroy(state_file)


def run_import_demo(manager, state_file):
    """Adopt a record that was created outside the state file."""
    provider = manager.dns_client.provider
    provider.create_record(
        provider.get_zone_id(DEMO_ZONE),
        {"type": "MX", "name": "mail.example.com", "content": "mx.example.net", "priority": 10},
    )

    console.print("\n[bold]5. Importing mail|example.com|MX[/bold]")
    manager.display_state(manager.import_record("mail|example.com|MX", state_file))


def main():
    """Run the demo."""
    display_demo_header()

    manager = RecordManager(create_demo_config())
    with tempfile.TemporaryDirectory() as temp_dir:
        state_file = os.path.join(temp_dir, "demo_state.yaml")
        run_lifecycle_demo(manager, state_file)
        run_import_demo(manager, state_file)

    console.print("\n[green]Demo completed[/green]")


if __name__ == "__main__":
    main()
