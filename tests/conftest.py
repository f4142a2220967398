"""Shared fixtures: a fresh registry and validator per test."""

import pytest

from formtree.config import Settings
from formtree.messages import MessageRegistry
from formtree.validator import TreeValidator


@pytest.fixture
def registry() -> MessageRegistry:
    return MessageRegistry()


@pytest.fixture
def validator(registry: MessageRegistry) -> TreeValidator:
    return TreeValidator(registry=registry, settings=Settings())
