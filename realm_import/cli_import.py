from __future__ import annotations

import argparse
from pathlib import Path

import orjson

from common.config import FileType, ImportSettings, load_yaml_config
from common.errors import InvalidImportError
from common.logger import get_logger
from realm_import.document_models import ImportSet
from realm_import.import_pipeline import resolve_imports

log = get_logger(__name__)


def build_settings(args: argparse.Namespace) -> ImportSettings:
    settings = load_yaml_config(Path(args.config)) if args.config else ImportSettings()

    overrides = {}
    if args.path:
        overrides["path"] = args.path
    if args.file_type:
        overrides["file_type"] = FileType(args.file_type)
    if args.var_substitution:
        overrides["var_substitution"] = True
    if args.no_var_substitution_in_variables:
        overrides["var_substitution_in_variables"] = False
    if args.var_substitution_undefined_ok:
        overrides["var_substitution_undefined_throws_exceptions"] = False
    if args.progress:
        overrides["show_progress"] = True
    return settings.model_copy(update=overrides)


def write_manifest(imports: ImportSet, out: Path) -> None:
    manifest = [
        {"name": name, "realm": doc.realm_name, "checksum": doc.checksum}
        for name, doc in imports.items()
    ]
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(orjson.dumps(manifest, option=orjson.OPT_INDENT_2))
    log.info("Wrote manifest to %s", out)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Resolve realm configuration files from a file, directory or URL."
    )
    parser.add_argument(
        "--path", type=str, default="", help="File, directory, file: URL or http(s) URL"
    )
    parser.add_argument(
        "--config", type=str, default="", help="Optional YAML config with an import: section"
    )
    parser.add_argument(
        "--file_type", type=str, default=None, choices=[t.value for t in FileType]
    )
    parser.add_argument("--var_substitution", action="store_true")
    parser.add_argument("--no_var_substitution_in_variables", action="store_true")
    parser.add_argument(
        "--var_substitution_undefined_ok",
        action="store_true",
        help="Leave undefined ${...} placeholders untouched instead of failing",
    )
    parser.add_argument(
        "--manifest", type=str, default="", help="Write name/realm/checksum JSON here"
    )
    parser.add_argument("--progress", action="store_true")
    args = parser.parse_args(argv)

    settings = build_settings(args)

    try:
        imports = resolve_imports(settings)
    except InvalidImportError as e:
        log.error("Import failed: %s", e)
        raise SystemExit(1)

    for name, doc in imports.items():
        log.info("%s -> realm=%s checksum=%s", name, doc.realm_name, doc.checksum)

    if args.manifest:
        write_manifest(imports, Path(args.manifest))


if __name__ == "__main__":
    main()
