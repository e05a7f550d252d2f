"""
Step definitions for Cloudflare Records integration tests.
"""

import parse
from behave import given, when, then, register_type

from cloudflare_records.core.record_manager import RecordManager


@parse.with_pattern(r'[^"]*')
def _parse_maybe_empty(text):
    return text


register_type(MaybeEmpty=_parse_maybe_empty)


def _run(context, operation, *args):
    """Run a manager operation, keeping its result or error on the context."""
    try:
        context.result = operation(*args)
        context.error = None
    except Exception as e:
        context.result = None
        context.error = e


def _zone_records(context):
    provider = context.manager.dns_client.provider
    return provider.records[provider.get_zone_id(context.zone)]


@given("the record manager is configured with the mock provider")
def step_impl(context):
    """Configure the record manager with the in-memory provider."""
    context.manager = RecordManager(context.test_config)
    assert context.manager.dns_client is not None


@given('the zone "{zone}" exists')
def step_impl(context, zone):
    context.zone = zone
    context.manager.dns_client.provider.add_zone(zone)


@given('a record configuration for "{subdomain}" in "{domain}" of type "{record_type}" with value "{value}"')
def step_impl(context, subdomain, domain, record_type, value):
    context.record_config = {
        "domain": domain,
        "subdomain": subdomain,
        "type": record_type,
        "value": value,
    }


@given('an apex record configuration in "{domain}" of type "{record_type}" with value "{value}"')
def step_impl(context, domain, record_type, value):
    context.record_config = {"domain": domain, "type": record_type, "value": value}


@given('the provider already has an "{record_type}" record "{name}" with value "{value}"')
def step_impl(context, record_type, name, value):
    provider = context.manager.dns_client.provider
    provider.create_record(
        provider.get_zone_id(context.zone),
        {"type": record_type, "name": name, "content": value},
    )


@given("I apply the record configuration")
@when("I apply the record configuration")
def step_impl(context):
    _run(context, context.manager.apply, context.record_config, context.state_file)
    if context.result is not None:
        context.created_id = context.result.id


@when('I change the value to "{value}" and apply')
def step_impl(context, value):
    context.record_config["value"] = value
    _run(context, context.manager.apply, context.record_config, context.state_file)


@when("the record is deleted at the provider")
def step_impl(context):
    _zone_records(context).pop(context.created_id)


@when("I refresh the state")
def step_impl(context):
    _run(context, context.manager.refresh, context.state_file)


@when("I destroy the record")
def step_impl(context):
    _run(context, context.manager.destroy, context.state_file)


@when('I import "{identifier}"')
def step_impl(context, identifier):
    _run(context, context.manager.import_record, identifier, context.state_file)


@then("the operation should succeed")
def step_impl(context):
    assert context.error is None, f"Operation failed: {context.error}"


@then('the operation should fail with "{message}"')
def step_impl(context, message):
    assert context.error is not None, "Operation should have failed"
    assert message in str(context.error), f"Unexpected error: {context.error}"


@then("the provider should hold {count:d} record")
@then("the provider should hold {count:d} records")
def step_impl(context, count):
    records = _zone_records(context)
    assert len(records) == count, f"Expected {count} records, found {len(records)}"


@then('the provider record name should be "{name}"')
def step_impl(context, name):
    record = _zone_records(context)[context.result.id]
    assert record["name"] == name, f"Unexpected record name {record['name']}"


@then('the provider record value should be "{value}"')
def step_impl(context, value):
    record = _zone_records(context)[context.result.id]
    assert record["content"] == value, f"Unexpected record value {record['content']}"


@then("the record id should be unchanged")
def step_impl(context):
    assert context.result.id == context.created_id


@then('the state should track the record with subdomain "{subdomain:MaybeEmpty}"')
def step_impl(context, subdomain):
    state = context.manager.load_state(context.state_file)
    assert state is not None and state.id, "State does not track a record"
    assert state.get("subdomain") == subdomain, f"Unexpected subdomain {state.get('subdomain')!r}"


@then("the state should be empty")
def step_impl(context):
    state = context.manager.load_state(context.state_file)
    assert state is None or not state.id, "State still tracks a record"
