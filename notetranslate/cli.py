# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import argparse
import dataclasses
import json
import os
import sys
from pathlib import Path

from notetranslate.exceptions import (
    ConfigurationError,
    FileIOError,
    NoteTranslateError,
    ParseError,
    UnsupportedFormatError,
)
from notetranslate.utils.dotenv import load_env_file
from notetranslate.utils.i18n import t

# Exit codes for orchestration environments
EC_OK = 0
EC_INVALID_INPUT = 10
EC_DEP_MISSING = 20
EC_TRANSLATE_ERROR = 30
EC_EXPORT_ERROR = 40
EC_CONFIG_ERROR = 50

EXPORT_FORMATS = ["markdown", "html", "print", "docx", "xlsx", "csv"]


def _build_exporter(ftype: str, title: str | None, merge_tables: bool = False):
    if ftype == "markdown":
        from notetranslate.exporter.md.md2md_exporter import MD2MDExporter
        return MD2MDExporter()
    if ftype in ("html", "print"):
        from notetranslate.exporter.md.md2html_exporter import (
            MD2HTMLExporter, MD2HTMLExporterConfig, MD2PrintHTMLExporter,
        )
        exporter_class = MD2PrintHTMLExporter if ftype == "print" else MD2HTMLExporter
        return exporter_class(MD2HTMLExporterConfig(title=title))
    if ftype == "docx":
        from notetranslate.exporter.md.md2docx_exporter import MD2DocxExporter, MD2DocxExporterConfig
        return MD2DocxExporter(MD2DocxExporterConfig(title=title))
    if ftype == "xlsx":
        from notetranslate.exporter.table.table2xlsx_exporter import Table2XlsxExporter, Table2XlsxExporterConfig
        return Table2XlsxExporter(Table2XlsxExporterConfig(merge_tables=merge_tables))
    if ftype == "csv":
        from notetranslate.exporter.table.table2csv_exporter import Table2CsvExporter, Table2CsvExporterConfig
        return Table2CsvExporter(Table2CsvExporterConfig(merge_tables=merge_tables))
    raise ValueError(f"Unknown export format: {ftype}")


def _import_input(input_path: Path, lang: str):
    from notetranslate.converter.importer import FormatImporter
    from notetranslate.ir.markdown_document import MarkdownDocument

    if not input_path.is_file():
        print(t("file_not_found", lang=lang, path=str(input_path)), file=sys.stderr)
        raise SystemExit(EC_INVALID_INPUT)
    try:
        result = FormatImporter().import_path(input_path)
    except ModuleNotFoundError as e:
        print(t("import_failed", lang=lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_DEP_MISSING)
    except UnsupportedFormatError as e:
        print(t("unsupported_format", lang=lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_INVALID_INPUT)
    except (ParseError, FileIOError) as e:
        print(t("import_failed", lang=lang, error=str(e)), file=sys.stderr)
        raise SystemExit(EC_INVALID_INPUT)
    return MarkdownDocument.from_text(result.text, stem=input_path.stem)


def _cmd_import(args: argparse.Namespace) -> int:
    document = _import_input(Path(args.input), args.lang)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(document.content)
        print(t("generated", lang=args.lang, path=str(out_path.resolve())))
    else:
        print(document.text)
    return EC_OK


def _cmd_export(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    document = _import_input(input_path, args.lang)
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    outputs = []
    for ftype in args.formats:
        exporter = _build_exporter(ftype, args.title, args.merge_tables)
        try:
            exported = exporter.export(document)
        except NoteTranslateError as e:
            print(t("export_failed", lang=args.lang, ftype=ftype, error=str(e)), file=sys.stderr)
            continue
        if ftype in ("xlsx", "csv") and not exported.content.strip():
            print(t("no_tables", lang=args.lang, path=str(input_path), ftype=ftype), file=sys.stderr)
        # "print" and "html" share the .html suffix
        stem = f"{input_path.stem}_print" if ftype == "print" else input_path.stem
        out_path = out_dir / f"{stem}{exported.suffix}"
        out_path.write_bytes(exported.content)
        outputs.append(out_path)
        print(t("generated", lang=args.lang, path=str(out_path.resolve())))
    return EC_OK if outputs else EC_EXPORT_ERROR


def _cmd_translate(args: argparse.Namespace) -> int:
    from notetranslate.translator.engine.base import EngineConfig
    from notetranslate.translator.router import TranslationRouter

    texts = list(args.text)
    if args.file:
        input_path = Path(args.file)
        if not input_path.is_file():
            print(t("file_not_found", lang=args.lang, path=str(input_path)), file=sys.stderr)
            return EC_INVALID_INPUT
        texts.append(input_path.read_text(encoding="utf-8"))
    if not texts and not sys.stdin.isatty():
        texts.append(sys.stdin.read())
    if not texts:
        print(t("translate_failed", lang=args.lang, engine=args.engine or "-", error="Empty text"), file=sys.stderr)
        return EC_INVALID_INPUT

    overrides = {}
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.concurrent is not None:
        overrides["concurrent"] = args.concurrent
    try:
        config = EngineConfig.from_env(args.engine, **overrides)
        router = TranslationRouter(config)
        if args.detect:
            print(t("detected_language", lang=args.lang, code=router.detect_language(texts[0])))
            return EC_OK
        if len(texts) == 1:
            results = [router.translate(texts[0], args.source_lang, args.target_lang)]
        else:
            results = router.translate_batch(texts, args.source_lang, args.target_lang)
    except ConfigurationError as e:
        print(t("config_error", lang=args.lang, error=str(e)), file=sys.stderr)
        return EC_CONFIG_ERROR

    exit_code = EC_OK
    for result in results:
        if args.json:
            print(json.dumps(dataclasses.asdict(result), ensure_ascii=False))
        elif result.success:
            print(result.text)
        if not result.success:
            exit_code = EC_TRANSLATE_ERROR
            if not args.json:
                print(t("translate_failed", lang=args.lang, engine=result.engine, error=result.error), file=sys.stderr)
    return exit_code


def _cmd_languages(args: argparse.Namespace) -> int:
    from notetranslate.translator.types import SUPPORTED_LANGUAGES

    for language in SUPPORTED_LANGUAGES:
        name = language.name_cn if args.lang == "zh" else language.name
        print(f"{language.code}\t{name}")
    return EC_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notetranslate",
        description="notetranslate: note import/export and multi-engine translation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  notetranslate import ./report.docx -o ./report.md\n"
            "  notetranslate export ./notes.md -f html docx --out-dir ./out\n"
            "  notetranslate translate \"Hello\" --engine google --to zh-CN\n"
        ),
    )
    parser.add_argument(
        "--env-file", help="Load environment variables from file (default: ./.env)", default=None
    )
    parser.add_argument(
        "--no-env", action="store_true", help="Do not auto-load .env from current directory"
    )
    parser.add_argument(
        "--lang", choices=["en", "zh"], default=os.getenv("NOTETRANSLATE_LANG", "en"),
        help="Language for CLI messages (default: en)"
    )
    subparsers = parser.add_subparsers(dest="cmd")

    sp = subparsers.add_parser("import", help="Convert a file to canonical markdown")
    sp.add_argument("input", help="Input file (md, txt, html, docx, xlsx, csv, pdf, json)")
    sp.add_argument("-o", "--output", help="Write markdown to this file instead of stdout")
    sp.set_defaults(func=_cmd_import)

    sp = subparsers.add_parser("export", help="Export a file to other formats")
    sp.add_argument("input", help="Input file; non-markdown input is imported first")
    sp.add_argument("-f", "--formats", nargs="+", choices=EXPORT_FORMATS, default=["html"],
                    help="Export formats (default: html)")
    sp.add_argument("--out-dir", default="./output", help="Output directory (default: ./output)")
    sp.add_argument("--title", help="Document title for html/docx (default: file stem)")
    sp.add_argument("--merge-tables", action="store_true",
                    help="Combine tables sharing the first table's header into one (xlsx/csv)")
    sp.set_defaults(func=_cmd_export)

    sp = subparsers.add_parser("translate", help="Translate free text")
    sp.add_argument("text", nargs="*", help="Text to translate; several values are translated as a batch")
    sp.add_argument("--file", help="Translate the contents of a UTF-8 text file")
    sp.add_argument("--engine", choices=["baidu", "youdao", "google", "deepl"],
                    help="Translation engine (or env NOTETRANSLATE_ENGINE, default: baidu)")
    sp.add_argument("--from", dest="source_lang", default="auto", help="Source language code (default: auto)")
    sp.add_argument("--to", dest="target_lang", default="zh-CN", help="Target language code (default: zh-CN)")
    sp.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    sp.add_argument("--concurrent", type=int, help="Parallel requests for batch translation")
    sp.add_argument("--detect", action="store_true", help="Only detect the language of the text")
    sp.add_argument("--json", action="store_true", help="Print one JSON result per line")
    sp.set_defaults(func=_cmd_translate)

    sp = subparsers.add_parser("languages", help="List supported language codes")
    sp.set_defaults(func=_cmd_languages)

    sp = subparsers.add_parser("version", help="Show version")
    sp.set_defaults(func=None, cmd="version")
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        raise SystemExit(EC_OK)

    if not args.no_env:
        env_path_used, loaded_keys = load_env_file(args.env_file)
        if env_path_used:
            print(t("env_loaded", lang=args.lang, path=env_path_used, count=len(loaded_keys)), file=sys.stderr)

    if args.cmd == "version":
        from notetranslate import __version__
        print(__version__)
        raise SystemExit(EC_OK)

    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main()
