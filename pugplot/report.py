# pugplot/report.py
from typing import List

from .models import Compound

RULE = "-" * 21
NONE = "None"

# label -> Compound attribute, in report order
DESCRIPTORS = [
    ("CID", "cid"),
    ("Molecular Formula", "molecular_formula"),
    ("Molecular Weight", "molecular_weight"),
    ("InChI", "inchi"),
    ("InChIKey", "inchikey"),
    ("Isomeric SMILES", "isomeric_smiles"),
    ("TPSA", "tpsa"),
    ("XLogP", "xlogp"),
    ("Exact Mass", "exact_mass"),
    ("Complexity", "complexity"),
    ("H-Bond Donor Count", "h_bond_donor_count"),
    ("H-Bond Acceptor Count", "h_bond_acceptor_count"),
    ("Rotatable Bond Count", "rotatable_bond_count"),
    ("Heavy Atom Count", "heavy_atom_count"),
    ("Charge", "charge"),
]


def _text(value) -> str:
    return NONE if value is None else str(value)


def _atoms(compound: Compound) -> List[str]:
    if compound.atoms is None:
        return [f"Atoms: {NONE}"]
    lines = ["Atoms:"]
    for aid, element in compound.atoms.atoms():
        lines.append(f"  Atom ID: {aid}, Element: {element}")
    return lines


def _bonds(compound: Compound) -> List[str]:
    if compound.bonds is None:
        return [f"Bonds: {NONE}"]
    lines = ["Bonds:"]
    tables = compound.bonds
    indent = "    " if len(tables) > 1 else "  "
    for t, table in enumerate(tables, start=1):
        if len(tables) > 1:
            lines.append(f"  Bond Table {t}:")
        for i, (aid1, aid2, order) in enumerate(table.bonds(), start=1):
            lines.append(f"{indent}Bond {i}: Atom1 {aid1}, Atom2 {aid2}, Order {order}")
    return lines


def _coordinates(compound: Compound) -> List[str]:
    if compound.coords is None:
        return [f"Coordinates: {NONE}"]
    lines = ["Coordinates:"]
    conformers = [c for coord_set in compound.coords for c in coord_set.conformers]
    for i, conformer in enumerate(conformers, start=1):
        lines.append(f"  Conformer {i}:")
        lines.append(f"    X = {list(conformer.x)}")
        lines.append(f"    Y = {list(conformer.y)}")
    return lines


def _properties(compound: Compound) -> List[str]:
    if compound.props is None:
        return [f"Properties: {NONE}"]
    lines = ["Properties:"]
    for prop in compound.props:
        lines.append(f"  Property: {_text(prop.urn.label)}, Value: {_text(prop.value.value)}")
    return lines


def _stereo(compound: Compound) -> List[str]:
    if compound.stereo is None:
        return [f"Stereo Information: {NONE}"]
    lines = ["Stereo Information:"]
    for i, s in enumerate(compound.stereo, start=1):
        t = s.tetrahedral
        if t is None:
            lines.append(f"  Stereo {i}: {NONE}")
            continue
        lines.append(
            f"  Stereo {i}: Above = {t.above}, Below = {t.below}, Bottom = {t.bottom}, "
            f"Center = {t.center}, Parity = {t.parity}, Top = {t.top}, Type = {t.kind}"
        )
    return lines


def _iupac(compound: Compound) -> List[str]:
    if compound.iupac is None:
        return [f"IUPAC Names: {NONE}"]
    lines = ["IUPAC Names:"]
    for entry in compound.iupac:
        lines.append(f"  {entry.name if entry.name is not None else 'Unknown'}")
    return lines


SECTIONS = [_atoms, _bonds, _coordinates, _properties, _stereo, _iupac]


def render_compound(compound: Compound) -> str:
    """
    Human-readable report for one compound.
    Field and section order are fixed; absent values print as None.
    """
    lines = ["Compound Information:", RULE]
    for label, attr in DESCRIPTORS:
        lines.append(f"{label}: {_text(getattr(compound, attr))}")
    for section in SECTIONS:
        lines.append(RULE)
        lines.extend(section(compound))
    return "\n".join(lines) + "\n"
