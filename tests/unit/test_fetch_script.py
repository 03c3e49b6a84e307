"""Unit tests for the exchange-rate fetch script."""

import json
from unittest.mock import patch

from divcalc.core.exceptions import ResourceLoadError
from scripts import fetch_exchange_rates


class TestFetchScript:
    """Tests for scripts/fetch_exchange_rates.py main()."""

    def test_writes_output_file(self, tmp_path):
        output = tmp_path / "public" / "exchange-rates.json"

        with patch.object(fetch_exchange_rates, "EcbRateProvider") as provider_cls:
            provider_cls.return_value.fetch_rates.return_value = {"2024-01-02": 1.0956}
            exit_code = fetch_exchange_rates.main(["--output", str(output)])

        assert exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {"2024-01-02": 1.0956}

    def test_defaults_to_settings_path(self, tmp_path):
        with patch.object(fetch_exchange_rates, "EcbRateProvider") as provider_cls:
            provider_cls.return_value.fetch_rates.return_value = {"2024-01-02": 1.0956}
            fetch_exchange_rates.main([])

        assert (tmp_path / "exchange-rates.json").exists()

    def test_fetch_failure_exits_nonzero(self, tmp_path):
        output = tmp_path / "rates.json"

        with patch.object(fetch_exchange_rates, "EcbRateProvider") as provider_cls:
            provider_cls.return_value.fetch_rates.side_effect = ResourceLoadError("down")
            exit_code = fetch_exchange_rates.main(["--output", str(output)])

        assert exit_code == 1
        assert not output.exists()
