"""Generate curated MkDocs API reference pages for normstore public exports."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from importlib import import_module
from pathlib import Path

import mkdocs_gen_files

PACKAGE = "normstore"
ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src" / PACKAGE
PUBLIC_MODULE = "normstore"


@dataclass(frozen=True)
class ReferencePage:
    slug: str
    title: str
    summary: str
    symbols: tuple[str, ...]


PAGES: tuple[ReferencePage, ...] = (
    ReferencePage(
        slug="state",
        title="State API",
        summary="The immutable snapshot and its record type.",
        symbols=(
            "normstore.State",
            "normstore.Record",
        ),
    ),
    ReferencePage(
        slug="operations",
        title="Store Operations API",
        summary="Pure functions that read a snapshot or return the next one.",
        symbols=(
            "normstore.get_default_state",
            "normstore.access_id",
            "normstore.access_id_list",
            "normstore.iterator",
            "normstore.insert",
            "normstore.update",
            "normstore.delete",
            "normstore.order",
        ),
    ),
    ReferencePage(
        slug="updaters-iteration",
        title="Updaters and Iteration API",
        summary="Merge/transform updaters, ordering and duplicate modes, and the list iterator.",
        symbols=(
            "normstore.MergePatch",
            "normstore.Transform",
            "normstore.Updater",
            "normstore.merge",
            "normstore.transform",
            "normstore.as_updater",
            "normstore.DuplicatePolicy",
            "normstore.SortDirection",
            "normstore.ListIterator",
            "normstore.IteratorResult",
        ),
    ),
    ReferencePage(
        slug="collection",
        title="Named Collection API",
        summary="The named wrapper and the exceptions raised across the package.",
        symbols=(
            "normstore.NormalizedCollection",
            "normstore.NormStoreError",
            "normstore.ConfigurationError",
            "normstore.MissingIdError",
            "normstore.DuplicateIdError",
            "normstore.IdentityChangedError",
        ),
    ),
)


def _validate_manifest() -> None:
    exported = set(import_module(PUBLIC_MODULE).__all__)
    counts = Counter(
        symbol.rpartition(".")[2] for page in PAGES for symbol in page.symbols
    )

    problems: list[str] = []
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    missing = sorted(exported - set(counts))
    extra = sorted(set(counts) - exported)
    if duplicates:
        problems.append(f"duplicate symbols: {', '.join(duplicates)}")
    if missing:
        problems.append(f"missing exports: {', '.join(missing)}")
    if extra:
        problems.append(f"unknown symbols: {', '.join(extra)}")

    if problems:
        message = "API reference manifest does not match module __all__. " + " ".join(problems)
        raise RuntimeError(message)


def _write_curated_page(page: ReferencePage) -> None:
    doc_rel_path = Path("reference/api") / f"{page.slug}.md"
    lines = [f"# {page.title}", "", page.summary, ""]
    for symbol in page.symbols:
        lines.append(f"::: {symbol}")
        lines.append("")

    with mkdocs_gen_files.open(doc_rel_path, "w") as fd:
        fd.write("\n".join(lines).rstrip() + "\n")
    mkdocs_gen_files.set_edit_path(doc_rel_path, Path("docs/gen_reference.py"))


def _write_index() -> None:
    lines = ["# API Reference", ""]
    for page in PAGES:
        lines.append(f"- [{page.title}](api/{page.slug}.md)")

    with mkdocs_gen_files.open("reference/index.md", "w") as fd:
        fd.write("\n".join(lines).rstrip() + "\n")
    mkdocs_gen_files.set_edit_path("reference/index.md", Path("docs/gen_reference.py"))


def _write_module_pages() -> None:
    for module_path in sorted(SRC_DIR.rglob("*.py")):
        rel = module_path.relative_to(SRC_DIR)
        if rel.name == "__init__.py":
            if not rel.parent.parts:
                continue
            module_parts = [PACKAGE, *rel.parent.parts]
            doc_rel_path = Path("reference/api").joinpath(*rel.parent.parts).with_suffix(".md")
        else:
            module_parts = [PACKAGE, *rel.with_suffix("").parts]
            doc_rel_path = (
                Path("reference/api").joinpath(*rel.with_suffix("").parts).with_suffix(".md")
            )

        with mkdocs_gen_files.open(doc_rel_path, "w") as fd:
            fd.write(f"::: {'.'.join(module_parts)}\n")

        mkdocs_gen_files.set_edit_path(doc_rel_path, module_path.relative_to(ROOT))


_validate_manifest()
for reference_page in PAGES:
    _write_curated_page(reference_page)
_write_index()
_write_module_pages()
