#!/usr/bin/env python3
# src/coordgen/infrastructure/adapters/rdkit_adapter.py

"""
Adapters between coordgen and RDKit.

RDKit bundles the CoordGen layout library, so it can stand in for a native
build of the engine. It also provides SMILES parsing for building graphs.
"""

import logging

import numpy as np
from rdkit import Chem
from rdkit.Chem import rdDepictor

from ...core.domain.errors import EngineError
from ...core.domain.interfaces.layout_engine import LayoutEngine
from ...core.domain.models.molecular_graph import MoleculeGraph

_BOND_TYPES = {
    1: Chem.BondType.SINGLE,
    2: Chem.BondType.DOUBLE,
    3: Chem.BondType.TRIPLE,
}


class RDKitCoordGenEngine(LayoutEngine):
    """Layout engine backed by RDKit's 2D depiction code."""

    def __init__(self, prefer_coordgen: bool = True):
        """Initialize engine.

        Args:
            prefer_coordgen: Use CoordGen rather than RDKit's native depictor
        """
        self.prefer_coordgen = prefer_coordgen
        self.logger = logging.getLogger(__name__)

    def _create_rdkit_mol(
        self, n_atoms: int, atoms: np.ndarray, n_bonds: int, bonds: np.ndarray
    ) -> Chem.Mol:
        """Rebuild the molecule from flat engine buffers.

        Raises:
            EngineError: If RDKit rejects an atom or bond
        """
        mol = Chem.RWMol()
        try:
            for atomic_number in atoms[:n_atoms]:
                rdatom = Chem.Atom(int(atomic_number))
                rdatom.SetNoImplicit(True)  # the graph lists every atom
                mol.AddAtom(rdatom)

            triples = bonds[: 3 * n_bonds].reshape(n_bonds, 3)
            for first, second, multiplicity in triples:
                mol.AddBond(
                    int(first),
                    int(second),
                    _BOND_TYPES.get(int(multiplicity), Chem.BondType.UNSPECIFIED),
                )
        except (RuntimeError, ValueError) as e:
            self.logger.error(f"Failed to build RDKit molecule: {str(e)}")
            raise EngineError(f"RDKit rejected the molecule: {str(e)}") from e

        mol = mol.GetMol()
        mol.UpdatePropertyCache(strict=False)
        Chem.GetSymmSSSR(mol)
        return mol

    def get_coordinates(
        self,
        n_atoms: int,
        atoms: np.ndarray,
        n_bonds: int,
        bonds: np.ndarray,
        coords: np.ndarray,
    ) -> None:
        if n_atoms == 0:
            return

        mol = self._create_rdkit_mol(n_atoms, atoms, n_bonds, bonds)

        positions = self._compute_positions(mol, self.prefer_coordgen)
        if not np.isfinite(positions).all() and self.prefer_coordgen:
            # CoordGen yields NaN for graphs made only of hydrogens
            self.logger.info(
                "CoordGen returned non-finite coordinates, "
                "retrying with RDKit's native depictor"
            )
            positions = self._compute_positions(mol, False)
        if not np.isfinite(positions).all():
            raise EngineError("RDKit produced non-finite 2D coordinates")

        coords[: 2 * n_atoms] = positions.astype(np.float32).reshape(-1)

    def _compute_positions(self, mol: Chem.Mol, prefer_coordgen: bool) -> np.ndarray:
        """Run the depictor and return an (n_atoms, 2) array of positions.

        Raises:
            EngineError: If RDKit fails to lay out the molecule
        """
        previous = rdDepictor.GetPreferCoordGen()
        rdDepictor.SetPreferCoordGen(prefer_coordgen)
        try:
            rdDepictor.Compute2DCoords(mol, clearConfs=True)
        except (RuntimeError, ValueError) as e:
            raise EngineError(f"RDKit failed to compute 2D coordinates: {str(e)}") from e
        finally:
            rdDepictor.SetPreferCoordGen(previous)

        return mol.GetConformer().GetPositions()[:, :2]


def graph_from_smiles(smiles: str, add_hydrogens: bool = False) -> MoleculeGraph:
    """
    Build a MoleculeGraph from a SMILES string.

    Aromatic bonds are kekulized so every bond is single, double or triple.

    Args:
        smiles: SMILES string
        add_hydrogens: Include explicit hydrogen atoms

    Returns:
        MoleculeGraph in RDKit atom order

    Raises:
        ValueError: If the SMILES cannot be parsed or kekulized
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"Could not parse SMILES: {smiles}")
    if add_hydrogens:
        mol = Chem.AddHs(mol)
    try:
        Chem.Kekulize(mol, clearAromaticFlags=True)
    except Chem.KekulizeException as e:
        raise ValueError(f"Could not kekulize {smiles}: {str(e)}") from e

    atoms = [atom.GetAtomicNum() for atom in mol.GetAtoms()]
    bonds = [
        (
            bond.GetBeginAtomIdx(),
            bond.GetEndAtomIdx(),
            int(bond.GetBondTypeAsDouble()),
        )
        for bond in mol.GetBonds()
    ]
    return MoleculeGraph.build(atoms, bonds)
