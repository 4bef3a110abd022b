"""Unit tests for ConfigurationBuilder."""
import copy
import logging

import pytest

from configweave.configuration import (
    Configuration,
    ConfigurationBuilder,
    MergeStrategy,
    SourceRegistration,
)
from configweave.exceptions import ConfigNotFoundError, InvalidKeyPathError
from configweave.settings import ConfigweaveSettings
from configweave.sources import JsonConfigurationSource, ObjectConfigurationSource
from configweave.testing import DelayedSource, FailingSource, RecordingSource


@pytest.fixture
def builder():
    return ConfigurationBuilder()


@pytest.mark.asyncio
async def test_build_without_sources_is_empty(builder):
    """Should build an empty configuration."""
    configuration = await builder.build()

    assert isinstance(configuration, Configuration)
    assert configuration.all() == {}


@pytest.mark.asyncio
async def test_build_single_source(builder):
    """Should return the source's settings."""
    settings = {"key": "value"}

    configuration = await builder.add_configuration_source(
        ObjectConfigurationSource(settings)
    ).build()

    assert configuration.all() == settings


def test_add_configuration_source_chains(builder):
    """Should return the builder and keep registrations in order."""
    first = ObjectConfigurationSource({})
    second = ObjectConfigurationSource({})

    result = builder.add_configuration_source(first).add_configuration_source(second, "nested")

    assert result is builder
    assert builder.sources == (
        SourceRegistration(source=first, key_path=None),
        SourceRegistration(source=second, key_path="nested"),
    )


def test_add_configuration_source_rejects_invalid_key_path(builder):
    """Should validate the key path at registration."""
    with pytest.raises(InvalidKeyPathError):
        builder.add_configuration_source(ObjectConfigurationSource({}), "a..b")

    assert builder.sources == ()


@pytest.mark.asyncio
async def test_build_merges_sources(builder):
    """Should combine settings from all sources."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"key": "value"}))
        .add_configuration_source(ObjectConfigurationSource({"otherKey": "other value"}))
        .build()
    )

    assert configuration.all() == {"key": "value", "otherKey": "other value"}


@pytest.mark.asyncio
async def test_build_later_sources_win(builder):
    """Should let later registrations override earlier ones."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"key": "first"}))
        .add_configuration_source(ObjectConfigurationSource({"key": "second"}))
        .build()
    )

    assert configuration.get("key") == "second"


@pytest.mark.asyncio
async def test_build_merge_strategies(builder):
    """Should apply the requested list strategy."""
    builder.add_configuration_source(
        ObjectConfigurationSource({"list": ["one", "two", "three"]})
    ).add_configuration_source(
        ObjectConfigurationSource({"list": ["two", "three", "four"]})
    )

    merged = await builder.build(MergeStrategy.MERGE_INDEXED)
    replaced = await builder.build(MergeStrategy.REPLACE_INDEXED)

    assert merged.get("list") == ["one", "two", "three", "four"]
    assert replaced.get("list") == ["two", "three", "four"]


@pytest.mark.asyncio
async def test_build_default_strategy_from_settings():
    """Should fall back to the settings' default strategy."""
    builder = ConfigurationBuilder(
        settings=ConfigweaveSettings(default_merge_strategy=MergeStrategy.REPLACE_INDEXED)
    )
    builder.add_configuration_source(
        ObjectConfigurationSource({"list": [1, 2]})
    ).add_configuration_source(ObjectConfigurationSource({"list": [2, 3]}))

    assert (await builder.build()).get("list") == [2, 3]
    assert (await builder.build(MergeStrategy.MERGE_INDEXED)).get("list") == [1, 2, 3]


@pytest.mark.asyncio
async def test_build_merges_nested_sources(builder):
    """Should deep-merge nested sections."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"nested": {"key": "value"}}))
        .add_configuration_source(
            ObjectConfigurationSource({"nested": {"other": {"key": "other value"}}})
        )
        .build()
    )

    assert configuration.all() == {
        "nested": {"key": "value", "other": {"key": "other value"}}
    }


@pytest.mark.asyncio
async def test_build_at_key_path(builder):
    """Should merge a source under its key path."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"key": "value"}))
        .add_configuration_source(ObjectConfigurationSource({"otherKey": "other value"}), "nested")
        .build()
    )

    assert configuration.all() == {"key": "value", "nested": {"otherKey": "other value"}}


@pytest.mark.asyncio
async def test_build_at_nested_key_path(builder):
    """Should create every section of the key path."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"key": "value"}))
        .add_configuration_source(
            ObjectConfigurationSource({"otherKey": "other value"}), "nested.section"
        )
        .build()
    )

    assert configuration.all() == {
        "key": "value",
        "nested": {"section": {"otherKey": "other value"}},
    }


@pytest.mark.asyncio
async def test_build_at_existing_key_path(builder):
    """Should keep what earlier sources put at the key path."""
    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource({"nested": {"key": "value"}}))
        .add_configuration_source(ObjectConfigurationSource({"otherKey": "other value"}), "nested")
        .build()
    )

    assert configuration.all() == {"nested": {"key": "value", "otherKey": "other value"}}


@pytest.mark.asyncio
async def test_build_folds_in_registration_order_not_completion_order(builder):
    """Should merge in the order sources were added, whichever loads first."""
    slow = DelayedSource({"key": "slow", "list": ["slow"]}, delay=0.05)
    fast = DelayedSource({"key": "fast", "list": ["fast"]}, delay=0)

    configuration = await (
        builder.add_configuration_source(slow)
        .add_configuration_source(fast)
        .build()
    )

    assert fast.completed_at < slow.completed_at
    assert configuration.get("key") == "fast"
    assert configuration.get("list") == ["slow", "fast"]


@pytest.mark.asyncio
async def test_build_loads_sources_concurrently(builder):
    """Should start every load before any of them completes."""
    first = DelayedSource({"a": 1}, delay=0.05)
    second = DelayedSource({"b": 2}, delay=0.05)
    recorder = RecordingSource({"c": 3})

    builder.add_configuration_source(first)
    builder.add_configuration_source(second)
    builder.add_configuration_source(recorder)

    configuration = await builder.build()

    assert configuration.all() == {"a": 1, "b": 2, "c": 3}
    assert recorder.load_count == 1
    assert recorder.load_calls[0] < first.completed_at
    assert recorder.load_calls[0] < second.completed_at


@pytest.mark.asyncio
async def test_build_reloads_sources_each_time(builder):
    """Should call load() again on every build."""
    recorder = RecordingSource({"key": "value"})
    builder.add_configuration_source(recorder)

    await builder.build()
    await builder.build()

    assert recorder.load_count == 2


@pytest.mark.asyncio
async def test_build_does_not_mutate_source_settings(builder):
    """Should leave the sources' trees untouched."""
    base = {"nested": {"key": "value"}, "list": [1]}
    override = {"nested": {"other": 1}, "list": [2]}
    base_before = copy.deepcopy(base)
    override_before = copy.deepcopy(override)

    configuration = await (
        builder.add_configuration_source(ObjectConfigurationSource(base))
        .add_configuration_source(ObjectConfigurationSource(override))
        .add_configuration_source(ObjectConfigurationSource(override), "nested")
        .build()
    )
    configuration.set("nested.key", "changed")
    configuration.get("list").append(3)

    assert base == base_before
    assert override == override_before


@pytest.mark.asyncio
async def test_build_propagates_source_failure(builder):
    """Should fail with the source's own exception and return nothing."""
    error = ValueError("broken source")
    builder.add_configuration_source(ObjectConfigurationSource({"key": "value"}))
    builder.add_configuration_source(FailingSource(error))
    builder.add_configuration_source(DelayedSource({"other": 1}, delay=0))

    with pytest.raises(ValueError) as exc_info:
        await builder.build()

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_build_propagates_file_source_failure(builder, tmp_path):
    """Should surface a missing file as ConfigNotFoundError."""
    builder.add_configuration_source(JsonConfigurationSource(tmp_path / "missing.json"))

    with pytest.raises(ConfigNotFoundError):
        await builder.build()


@pytest.mark.asyncio
async def test_build_logs_summary(builder, caplog):
    """Should log one summary record per build."""
    builder.add_configuration_source(ObjectConfigurationSource({"key": "value"}))

    with caplog.at_level(logging.INFO, logger="configweave.configuration.builder"):
        await builder.build()

    records = [r for r in caplog.records if r.getMessage() == "Configuration built"]
    assert len(records) == 1
    assert records[0].source_count == 1
    assert records[0].strategy == "MERGE_INDEXED"
