"""
File and directory driver.

Converts JSON files to source files, deriving the package and type names
from the output path when the options leave them empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorOptions
from .errors import GenerationIOError, JsonToCodeError
from .generator import CodeGenerator
from .naming import RenameHint
from .utils import normalize_name
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a directory conversion."""

    written: list[Path] = field(default_factory=list)
    failures: dict[Path, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def resolve_options(out_path: Path | str, options: GeneratorOptions | None = None) -> GeneratorOptions:
    """
    Return a copy of the options with package and type name filled in.

    The type name is derived from the output file name, the package from the
    name of the output directory (resolved to an absolute path when it is
    ``.`` or ``..``). Names already set are kept.
    """
    options = options.copy_for_document() if options is not None else GeneratorOptions()
    out_path = Path(out_path)

    if not options.type_name:
        options.type_name = options.renamer(out_path.stem, RenameHint.ROOT)

    if not options.package:
        directory = out_path.parent
        if directory.name in ("", ".", ".."):
            directory = directory.resolve()
        options.package = normalize_name(directory.name)

    return options


def convert_file(json_path: Path | str, out_path: Path | str, options: GeneratorOptions | None = None) -> Path:
    """
    Convert one JSON file to a source file.

    Args:
        json_path: JSON document to read
        out_path: Source file to write; missing directories are created
        options: Generation options, not modified

    Returns:
        The written path

    Raises:
        ConfigurationError: If the options are invalid (nothing is read or written)
        GenerationIOError: If reading or writing fails
    """
    json_path = Path(json_path)
    out_path = Path(out_path)
    options = resolve_options(out_path, options)
    options.validate()

    try:
        data = json_path.read_bytes()
    except OSError as e:
        raise GenerationIOError(json_path, "read", e) from e

    code = CodeGenerator(options).generate(data)
    AtomicWriter().write(out_path, code)
    logger.info("Wrote %s (%s) from %s", out_path, options.type_name, json_path)
    return out_path


def convert_dir(
    json_dir: Path | str,
    out_dir: Path | str,
    options: GeneratorOptions | None = None,
    keep_going: bool = False,
) -> BatchResult:
    """
    Convert every ``*.json`` file below a directory.

    Output files mirror the relative input paths with the extension of the
    target language. Each file gets its own copy of the options and its own
    type name derived from its file name; a type name set in the options is
    ignored. Files are processed in sorted path order.

    Args:
        json_dir: Directory searched recursively for JSON files
        out_dir: Root of the output tree
        options: Generation options, not modified
        keep_going: Record failures and continue instead of stopping at the first one

    Returns:
        Written paths and, with ``keep_going``, the failures by input path

    Raises:
        GenerationIOError: If ``json_dir`` is not a directory
        JsonToCodeError: The first failure, unless ``keep_going`` is set
    """
    json_dir = Path(json_dir)
    out_dir = Path(out_dir)
    options = options if options is not None else GeneratorOptions()
    extension = options.file_extension

    if not json_dir.is_dir():
        raise GenerationIOError(json_dir, "list directory", NotADirectoryError(f"Not a directory: {json_dir}"))

    if options.type_name:
        logger.warning("Ignoring type name %s: each file gets a type name derived from its file name", options.type_name)

    result = BatchResult()
    for json_path in sorted(json_dir.rglob("*.json")):
        if not json_path.is_file():
            continue
        out_path = out_dir / json_path.relative_to(json_dir).with_suffix(extension)

        doc_options = options.copy_for_document()
        doc_options.type_name = ""
        try:
            result.written.append(convert_file(json_path, out_path, doc_options))
        except (JsonToCodeError, ValueError) as e:
            # ValueError covers json.JSONDecodeError and UnicodeDecodeError
            if not keep_going:
                raise
            logger.warning("Skipping %s: %s", json_path, e)
            result.failures[json_path] = e

    logger.info("Converted %d of %d files from %s", len(result.written), len(result.written) + len(result.failures), json_dir)
    return result
