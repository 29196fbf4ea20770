from evaluation.harness import run_evaluation_suite, run_smoke_checks


def test_evaluation_scenarios_pass():
    results = run_evaluation_suite()
    assert results, "Expected evaluation scenarios to run"
    for result in results:
        assert result["passed"], f"Scenario {result['scenario']} failed checks: {result['checks']}"


def test_missing_tops_scenario_returns_no_outfits():
    results = {result["scenario"]: result for result in run_evaluation_suite()}
    assert results["workout_missing_tops"]["outfit_count"] == 0
    assert results["workout_missing_tops"]["response"]["status"] == "empty"


def test_smoke_checks_summarise_each_scenario():
    lines = run_smoke_checks()
    assert all(line.endswith("passed") for line in lines)
