"""Wspólne fixtures: przykładowa hierarchia, przykładowy zrzut, repozytorium w pamięci."""

import gzip
import io
import textwrap

import pytest

from hierarchy import build_closure, load_units, parse_hierarchy
from store import MemoryRepository

ALL_STRUCT = textwrap.dedent("""\
    <allStruct>
      <div id="ucla" label="UCLA" type="campus" directSubmit="enabled">
        <div id="ucla_history" label="History" type="oru">
          <div id="ucla_history_papers" label="History Papers" type="series" hide="eschol"/>
        </div>
        <div id="ucla_old" label="Old Department" type="oru" directSubmit="moribund"/>
      </div>
      <div id="ucb" label="UC Berkeley" type="campus">
        <ref ref="ucla_history_papers"/>
      </div>
    </allStruct>
""")

RECORD_FULL = textwrap.dedent("""\
    <document>
      <identifier>qt0001</identifier>
      <source>repo</source>
      <contentExists>yes</contentExists>
      <pdfExists>no</pdfExists>
      <language>en</language>
      <peerReview>yes</peerReview>
      <pubStatus>published</pubStatus>
      <title>On Closure Tables</title>
      <format>application/pdf</format>
      <type>article</type>
      <date>2004-05-01</date>
      <dateStamp>2004-06-01</dateStamp>
      <rights>cc-by</rights>
      <creator>Smith, John; Example Org</creator>
      <entityOnly>ucla_history_papers|ghost_unit|ucla</entityOnly>
    </document>
""")

RECORD_BARE = textwrap.dedent("""\
    <document>
      <identifier>qt0002</identifier>
      <source>repo</source>
      <title>Bare Record</title>
      <format>text/html</format>
      <type>article</type>
    </document>
""")

RECORD_NO_ID = textwrap.dedent("""\
    <document>
      <title>Lost Record</title>
    </document>
""")


def parse_xml(text: str):
    return parse_hierarchy(io.StringIO(text))


@pytest.fixture
def repo() -> MemoryRepository:
    return MemoryRepository()


@pytest.fixture
def struct_root():
    return parse_xml(ALL_STRUCT)


@pytest.fixture
def loaded(repo, struct_root):
    """Repozytorium z jednostkami i domknięciem; zwraca (repo, hierarchy)."""
    hier = load_units(struct_root, repo.create_unit)
    for edge in build_closure(hier.children):
        repo.create_closure_edge(edge)
    return repo, hier


@pytest.fixture
def struct_file(tmp_path):
    path = tmp_path / "allStruct.xml"
    path.write_text(ALL_STRUCT, encoding="utf-8")
    return path


@pytest.fixture
def dump_file(tmp_path):
    path = tmp_path / "indexDump.xml"
    path.write_text(RECORD_FULL + RECORD_BARE, encoding="utf-8")
    return path


@pytest.fixture
def gz_dump_file(tmp_path):
    path = tmp_path / "indexDump.xml.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write(RECORD_FULL + RECORD_BARE)
    return path
