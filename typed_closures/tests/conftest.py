# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from typed_closures.config import get_config, set_config


@pytest.fixture(autouse=True)
def _restore_contract_config():
	"""Tests may swap the active ContractConfig; put the original back afterwards."""
	previous = get_config()
	yield
	set_config(previous)
