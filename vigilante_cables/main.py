"""Punto de entrada principal para el paquete vigilante_cables."""

import logging
from typing import List, Optional

from vigilante_cables.cli import parse_args
from vigilante_cables.pipeline import run_pipeline


def main(argv: Optional[List[str]] = None) -> None:
    """Parsea argumentos y ejecuta el pipeline de salud de cables."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    run_pipeline(
        warnings_path=args.warnings,
        url=args.url,
        timeout=float(args.timeout),
        retries=int(args.retries),
        console_format=args.console_format,
        output_json=args.output_json or None,
        log_jsonl=args.log_jsonl,
        now=args.now,
        iterations=max(1, args.iterations),
        sleep_seconds=float(args.sleep),
    )


if __name__ == "__main__":
    main()
