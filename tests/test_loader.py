"""Wczytywanie allStruct: jednostki, atrybuty, odwołania <ref>, wielu rodziców."""

import pytest

from conftest import parse_xml
from data_model import HierarchyError, Unit
from hierarchy import load_units, root_unit


def test_root_unit_is_created_first(repo, struct_root):
    created = []
    load_units(struct_root, created.append)
    assert created[0] == root_unit()
    assert created[0].id == "root"
    assert created[0].attrs is None


def test_units_in_document_order(repo, struct_root):
    load_units(struct_root, repo.create_unit)
    assert list(repo.units) == [
        "root", "ucla", "ucla_history", "ucla_history_papers", "ucla_old", "ucb",
    ]


def test_div_fields_and_attrs(repo, struct_root):
    load_units(struct_root, repo.create_unit)
    ucla = repo.units["ucla"]
    assert ucla == Unit(id="ucla", name="UCLA", type="campus", is_active=True)
    assert ucla.attrs == {"directSubmit": "enabled"}
    assert repo.units["ucla_history"].attrs == {}
    assert repo.units["ucla_history_papers"].attrs == {"hide": "eschol"}


def test_moribund_unit_is_inactive(repo, struct_root):
    load_units(struct_root, repo.create_unit)
    assert repo.units["ucla_old"].is_active is False
    assert repo.units["ucb"].is_active is True


def test_ref_creates_no_unit_but_links(repo, struct_root):
    hier = load_units(struct_root, repo.create_unit)
    assert len(repo.units) == 6
    assert hier.children["ucb"] == ["ucla_history_papers"]
    assert hier.parents["ucla_history_papers"] == ["ucla_history", "ucb"]


def test_adjacency_and_defined_set(struct_root):
    hier = load_units(struct_root, lambda unit: None)
    assert hier.children["root"] == ["ucla", "ucb"]
    assert hier.children["ucla"] == ["ucla_history", "ucla_old"]
    assert hier.defined == {"ucla", "ucla_history", "ucla_history_papers", "ucla_old", "ucb"}
    assert not hier.is_defined("root")


def test_ref_to_undefined_unit_is_not_defined():
    root = parse_xml('<allStruct><div id="a"><ref ref="gone"/></div></allStruct>')
    hier = load_units(root, lambda unit: None)
    assert hier.children["a"] == ["gone"]
    assert not hier.is_defined("gone")


def test_child_without_id_is_fatal():
    root = parse_xml('<allStruct><div id="a"><div label="nameless"/></div></allStruct>')
    with pytest.raises(HierarchyError, match="bez id/ref"):
        load_units(root, lambda unit: None)
