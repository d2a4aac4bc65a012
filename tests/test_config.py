from geosketch import Sketch, SolverConfig, get_solver_config, set_solver_config


def test_default_config():
    config = get_solver_config()
    assert config.timeout_ms is None
    assert config.precision_denominator_limit == 1000
    assert config.precision_numerator_limit == 1_000_000_000
    assert config.algebraic_precision == 20


def test_set_solver_config_applies_to_new_sketches():
    original = get_solver_config()
    try:
        set_solver_config(SolverConfig(timeout_ms=500))
        assert Sketch().config.timeout_ms == 500

        copy = get_solver_config()
        copy.timeout_ms = 1
        assert get_solver_config().timeout_ms == 500
    finally:
        set_solver_config(original)

    assert get_solver_config() == original
