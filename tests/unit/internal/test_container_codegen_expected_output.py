from __future__ import annotations

from pathlib import Path

from digen.generator import Generator

_EXPECTED_DIR = Path(__file__).with_name("codegen_expected")


def _read_expected(name: str) -> str:
    return (_EXPECTED_DIR / name).read_text(encoding="utf-8")


def _graph_generator() -> Generator:
    return (
        Generator()
        .add_imports("fmt", "os")
        .set_receiver_name("cnt")
        .set_type_name("DIContainer")
        .add_dependency(
            "a",
            "*A",
            '{\n\tfmt.Fprintln(os.Stdout, "creating A...")\n\treturn &A{}\n}',
        )
        .add_dependency(
            "b",
            "*B",
            '{\n\ta := cnt.A()\n\tfmt.Fprintln(os.Stdout, "creating B...")\n\treturn &B{a}\n}',
        )
        .add_dependency(
            "c",
            "*C",
            "{\n\ta := cnt.A()\n\tb := cnt.B()\n"
            '\tfmt.Fprintln(os.Stdout, "creating C...")\n\treturn &C{a, b}\n}',
        )
        .add_dependency(
            "d",
            "*D",
            "{\n\tb := cnt.B()\n\tc := cnt.C()\n"
            '\tfmt.Fprintln(os.Stdout, "creating D...")\n\treturn &D{b, c}\n}',
        )
    )


def test_codegen_matches_expected_for_dependency_graph() -> None:
    generated = _graph_generator().render()

    assert generated == _read_expected("di_container_graph.txt")


def test_codegen_for_dependency_graph_is_stable_across_generators() -> None:
    assert _graph_generator().render() == _graph_generator().render()
