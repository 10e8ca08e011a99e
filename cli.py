import argparse
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from core.csv_writer import write_csv
from core.intake import build_context, read_file_content, select_files
from core.logger import get_logger, setup_logging
from core.settings import load_settings
from core.sniffer import is_text_document


def _expand_inputs(inputs):
    """Ficheros tal cual; de las carpetas, sus ficheros ordenados por nombre."""
    paths = []
    for raw in inputs:
        p = Path(raw)
        if p.is_dir():
            paths.extend(sorted(q for q in p.iterdir() if q.is_file()))
        else:
            paths.append(p)
    return paths


def main(argv=None):
    load_dotenv()
    setup_logging()  # activar sinks (consola + logs/app.log)
    log = get_logger()
    settings = load_settings()

    ap = argparse.ArgumentParser(
        description="Extrae texto legible de documentos (PDF y binarios) para usarlo como contexto"
    )
    ap.add_argument("inputs", nargs="+", help="Ficheros o carpetas a procesar")
    ap.add_argument("--csv", help="Escribe un resumen por fichero en este CSV")
    ap.add_argument("--sniff", action="store_true", help="Muestra la comprobación rápida de firma")
    ap.add_argument(
        "--any-type",
        action="store_true",
        help="No filtrar por tipo: los binarios desconocidos van al extractor",
    )
    ap.add_argument("--max-files", type=int, default=settings.max_files)
    ap.add_argument("--max-mb", type=int, default=settings.max_file_mb)
    ap.add_argument(
        "--parallel",
        action="store_true",
        default=settings.parallel,
        help="Ejecuta las estrategias en paralelo",
    )
    args = ap.parse_args(argv)

    settings = replace(settings, max_files=args.max_files, max_file_mb=args.max_mb)

    paths = _expand_inputs(args.inputs)
    missing = [p for p in paths if not p.exists()]
    for p in missing:
        log.error(f"❌ Ruta no encontrada: {p}")

    intake = select_files([p for p in paths if p.exists()], settings, any_type=args.any_type)
    for r in intake.rejected:
        print(f"⚠️ Descartado {r.path.name}: {r.reason}")

    if not intake.accepted:
        msg = "⚠️ No hay archivos para procesar"
        log.warning(msg)
        raise SystemExit(msg)

    contents = []
    for path in intake.accepted:
        content = read_file_content(path, with_sniff=args.sniff, parallel=args.parallel)
        contents.append(content)
        log.info(f"[CLI] {path.name}: {content.route.value} -> {content.status.value}")
        if args.sniff and content.sniff is not None:
            v = content.sniff
            print(
                f"[SNIFF] {path.name}: firma={v.looks_like_document} "
                f"texto={v.has_early_text} documento_de_texto={is_text_document(v)}"
            )

    print(build_context(contents), end="")

    if args.csv:
        csv_path = write_csv(contents, args.csv)
        log.info(f"Resumen escrito en {csv_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
