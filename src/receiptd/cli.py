"""
Command line entry point.

    receiptd render mail.eml -o receipt.pdf
    receiptd batch inbox/*.eml --output-dir out --quarantine
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from receiptd.api.dependencies import build_use_case
from receiptd.domain.exceptions import ReceiptError, ResourceLoadError

logger = logging.getLogger("receiptd")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receiptd",
        description="Render point-of-sale notification emails as PDF documents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="render a single mail file")
    render.add_argument("input", help="mail file containing the HTML notification")
    render.add_argument("-o", "--output", default="receipt.pdf")
    render.add_argument(
        "--dump-ops",
        action="store_true",
        help="print the draw operations instead of writing a PDF",
    )

    batch = subparsers.add_parser("batch", help="render several mail files")
    batch.add_argument("inputs", nargs="+")
    batch.add_argument(
        "--output-dir", default=os.getenv("RECEIPTD_OUTPUT_DIR", "output")
    )
    batch.add_argument(
        "--quarantine",
        action="store_true",
        help="rename inputs that fail to <name>.<error-code>.failed",
    )
    return parser


def _render(use_case, args) -> int:
    if args.dump_ops:
        try:
            canvas = use_case.preview(use_case.file_handler.read_file(args.input))
        except ReceiptError as e:
            logger.error(f"{args.input}: {str(e)}")
            return 1
        print(canvas.dump())
        return 0

    result = use_case.process_file(args.input, args.output)
    if not result["success"]:
        logger.error(f"{args.input}: {result['error']}")
        return 1
    return 0


def _batch(use_case, args) -> int:
    failures = 0
    for input_path in args.inputs:
        output_path = use_case.file_handler.output_path(input_path, args.output_dir)
        result = use_case.process_file(input_path, output_path, args.quarantine)
        if not result["success"]:
            failures += 1
            logger.error(f"{input_path}: {result['error']}")
    logger.info(f"Rendered {len(args.inputs) - failures} of {len(args.inputs)} files")
    return 1 if failures else 0


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("RECEIPTD_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        use_case = build_use_case()
    except ResourceLoadError as e:
        logger.error(f"Cannot start: {str(e)}")
        return 2

    if args.command == "render":
        return _render(use_case, args)
    return _batch(use_case, args)


if __name__ == "__main__":
    sys.exit(main())
