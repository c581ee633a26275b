"""Tests for the simulation harness."""

import logging
import math

import numpy as np
import pytest

from majority import simulations as sim


@pytest.fixture(autouse=True)
def seeded():
    np.random.seed(0)


class TestAgreement:

    def test_all_methods_agree(self):
        df = sim.sim_agreement(30, max_n=25)
        assert len(df) == 30
        assert {"n", "truth", "boyer_moore", "fischer_salzberg", "agree"} <= set(df.columns)
        assert df["agree"].all()

    def test_logs_summary(self, caplog):
        caplog.set_level(logging.INFO, logger="majority.simulations")
        sim.sim_agreement(5)
        assert "Agreement over 5 streams" in caplog.text


class TestRuntime:

    @pytest.mark.parametrize("method", ["boyer_moore", "fischer_salzberg"])
    def test_sim_runtime_columns(self, method):
        df = sim.sim_runtime(5, method, n_range=(10, 50))
        assert list(df.columns) == ["time", "found", "no_elements", "no_symbols"]
        assert (df["time"] >= 0).all()

    def test_sim_runtime_unknown_method_raises(self):
        with pytest.raises(ValueError, match="Unknown majority method"):
            sim.sim_runtime(1, "misra_gries")

    def test_compare_runtime(self):
        df, p_val = sim.compare_runtime(8, n_range=(10, 50))
        assert len(df) == 8
        assert math.isnan(p_val) or 0.0 <= p_val <= 1.0

    def test_compare_runtime_single_instance(self):
        _, p_val = sim.compare_runtime(1, n_range=(10, 20))
        assert math.isnan(p_val)


class TestAuxMemory:

    def test_aux_accounts_for_every_element(self):
        df = sim.aux_memory_profile(20, max_runs=15)
        assert (df["aux_len"] + df["bucket"] == df["no_elements"]).all()
        assert (df["aux_ratio"] <= 1.0).all()
