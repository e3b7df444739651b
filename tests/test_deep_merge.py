from cssdice.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "generate": {"count": 100, "kinds": ["integer", "color"]},
        "seed": {"env": "CSSDICE_SEED", "value": None},
    }
    override = {
        "generate": {"kinds": ["length"]},
        "seed": {"value": 3},
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {
        "generate": {"count": 100, "kinds": ["length"]},
        "seed": {"env": "CSSDICE_SEED", "value": 3},
    }
    # ensure original not mutated
    assert base["generate"]["kinds"] == ["integer", "color"]
