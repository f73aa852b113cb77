#!/usr/bin/env python3
# src/coordgen/presentation/cli/generate_coordinates.py

"""
Command-line interface for generating 2D coordinates.

Molecules come from SMILES arguments and/or a JSON file holding objects of the
form ``{"name": ..., "atoms": [...], "bonds": [[first, second, order], ...]}``.
Results are written as a JSON list, one entry per molecule.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from ...config import CoordgenConfig, ValidationMode
from ...core.domain.errors import EngineError, ValidationError
from ...core.domain.models.molecular_graph import MoleculeGraph
from ...core.services.coordinate_service import CoordinateService
from ...infrastructure.adapters.rdkit_adapter import graph_from_smiles


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_molecules(input_path: Path) -> List[Tuple[str, Dict[str, Any]]]:
    """
    Load molecule records from a JSON file.

    Args:
        input_path: File holding one molecule object or a list of them

    Returns:
        List of (name, record) pairs

    Raises:
        ValueError: If a record lacks an ``atoms`` list
    """
    with open(input_path, "r") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]

    molecules = []
    for idx, record in enumerate(data):
        if not isinstance(record, dict) or "atoms" not in record:
            raise ValueError(f"Record {idx} in {input_path} has no 'atoms' list")
        name = str(record.get("name", f"{input_path.stem}_{idx}"))
        molecules.append((name, record))
    return molecules


def process_molecule(
    service: CoordinateService,
    name: str,
    source: Any,
    add_hydrogens: bool = False,
    unchecked: bool = False,
) -> Dict[str, Any]:
    """
    Lay out one molecule and describe the outcome.

    Args:
        service: Coordinate service to use
        name: Label for the output record
        source: SMILES string or JSON record with ``atoms`` and ``bonds``
        add_hydrogens: Add explicit hydrogens to SMILES input
        unchecked: Use the trusted call path instead of validating first

    Returns:
        Output record with either ``coordinates`` or ``error`` set
    """
    try:
        if isinstance(source, str):
            graph = graph_from_smiles(source, add_hydrogens=add_hydrogens)
        else:
            graph = MoleculeGraph.build(source["atoms"], source.get("bonds", []))

        if unchecked:
            coordinates = service.generate_unchecked(graph.atoms, graph.bonds)
        else:
            coordinates = service.generate(graph.atoms, graph.bonds)
    except ValidationError as e:
        logging.error(f"Invalid molecule {name}: {str(e)}")
        return {
            "name": name,
            "error": type(e).__name__,
            "message": str(e),
            "details": e.as_dict(),
        }
    except (ValueError, TypeError, EngineError) as e:
        logging.error(f"Error processing {name}: {str(e)}")
        return {"name": name, "error": type(e).__name__, "message": str(e)}

    return {
        "name": name,
        "coordinates": [[coord.x, coord.y] for coord in coordinates],
    }


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate 2D coordinates for molecular graphs"
    )
    parser.add_argument("smiles", nargs="*", help="SMILES strings to lay out")
    parser.add_argument(
        "--input", type=Path, help="JSON file of atom/bond molecule records"
    )
    parser.add_argument(
        "--output", type=Path, help="Write results here instead of stdout"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ValidationMode],
        help="Validation mode for the trusted call path",
    )
    parser.add_argument(
        "--unchecked",
        action="store_true",
        help="Skip up-front validation and call the trusted path directly",
    )
    parser.add_argument("--library", help="Native CoordGen shared library to load")
    parser.add_argument(
        "--add-hydrogens",
        action="store_true",
        help="Add explicit hydrogens to SMILES input",
    )
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for coordinate generation CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    sources: List[Tuple[str, Any]] = [(smiles, smiles) for smiles in args.smiles]
    if args.input:
        sources.extend(load_molecules(args.input))
    if not sources:
        parser.error("provide SMILES strings or --input")

    env_config = CoordgenConfig.from_env()
    config = CoordgenConfig(
        validation_mode=ValidationMode.parse(args.mode)
        if args.mode
        else env_config.validation_mode,
        library_path=args.library or env_config.library_path,
    )
    service = CoordinateService(config=config)

    results = []
    for name, source in tqdm(sources, desc="Generating coordinates", disable=len(sources) < 2):
        results.append(
            process_molecule(
                service,
                name,
                source,
                add_hydrogens=args.add_hydrogens,
                unchecked=args.unchecked,
            )
        )

    payload = json.dumps(results, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload + "\n")
        logging.info(f"Saved {len(results)} results to {args.output}")
    else:
        print(payload)

    failed = sum(1 for result in results if "error" in result)
    if failed:
        logging.warning(f"{failed} of {len(results)} molecules failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
