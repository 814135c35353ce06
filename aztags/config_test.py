"""Tests for settings"""
import pytest
from pydantic import ValidationError

from aztags.config import Settings


class TestLogLevel:
	def test_default(self):
		assert Settings().log_level == "WARNING"

	def test_case_insensitive(self, monkeypatch):
		monkeypatch.setenv("AZTAGS_LOG_LEVEL", "debug")
		assert Settings().log_level == "DEBUG"

	def test_unknown_level(self, monkeypatch):
		monkeypatch.setenv("AZTAGS_LOG_LEVEL", "BOGUS")
		with pytest.raises(ValidationError):
			Settings()


class TestPageSize:
	def test_default(self):
		assert Settings().page_size == 1000

	@pytest.mark.parametrize("page_size", ["0", "1001"])
	def test_out_of_range(self, monkeypatch, page_size):
		monkeypatch.setenv("AZTAGS_PAGE_SIZE", page_size)
		with pytest.raises(ValidationError):
			Settings()
