"""CLI entry point — argument parsing, orchestration."""

import argparse
import sys

from ge2gg.pacts.errors import ConversionError
from ge2gg.core.convert import convert
from ge2gg.io.parsing import load_manifests
from ge2gg.io.config import load_config, validate_config
from ge2gg.io.output import write_manifests, emit_warnings


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ge2gg",
        description="Convert Gloo Edge VirtualService/RouteTable manifests to "
                    "Gateway API HTTPRoutes plus RouteOption/VirtualHostOption resources"
    )
    parser.add_argument("input_file", help="YAML manifest stream to convert")
    parser.add_argument("output_file", help="Where to write the converted manifests")
    parser.add_argument(
        "--config",
        help="Path to a ge2gg.yaml config file (API versions, default namespace, "
             "selector label order)",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        config_warnings = validate_config(config)

        documents = load_manifests(args.input_file)
        print(f"Parsed {len(documents)} document(s) from {args.input_file}", file=sys.stderr)

        result = convert(documents, config)
        emit_warnings(config_warnings + result.warnings)
        write_manifests(result.resources, args.output_file)
    except (ConversionError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Conversion successful. Output written to {args.output_file}", file=sys.stderr)


if __name__ == "__main__":
    main()
