"""
models.py

Typed, immutable view of one PubChem PC_Compounds record.

- Every top-level Compound field is optional; absent means "not reported".
- Scalars are strict: a string where a number belongs fails the whole record.
- Parallel arrays (atoms, bonds, conformer x/y) must be co-indexed.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, field_validator, model_validator

Count = Annotated[int, Strict(), Field(ge=0)]
SignedInt = Annotated[int, Strict()]
Real = Annotated[float, Strict()]
Text = Annotated[str, Strict()]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


def _check_parallel(owner: str, **arrays: Tuple) -> None:
    lengths = {k: len(v) for k, v in arrays.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{k}={n}" for k, n in lengths.items())
        raise ValueError(f"{owner} arrays differ in length ({detail})")


# ===========================
# Composition
# ===========================

class AtomTable(_Record):
    aid: Tuple[Count, ...]
    element: Tuple[Count, ...]

    @model_validator(mode="after")
    def _co_indexed(self):
        _check_parallel("atom", aid=self.aid, element=self.element)
        return self

    def atoms(self) -> Iterator[Tuple[int, int]]:
        return zip(self.aid, self.element)

    def __len__(self):
        return len(self.aid)


class BondTable(_Record):
    aid1: Tuple[Count, ...]
    aid2: Tuple[Count, ...]
    order: Tuple[Count, ...]

    @model_validator(mode="after")
    def _co_indexed(self):
        _check_parallel("bond", aid1=self.aid1, aid2=self.aid2, order=self.order)
        return self

    def bonds(self) -> Iterator[Tuple[int, int, int]]:
        return zip(self.aid1, self.aid2, self.order)

    def __len__(self):
        return len(self.aid1)


class Conformer(_Record):
    x: Tuple[Real, ...]
    y: Tuple[Real, ...]

    @model_validator(mode="after")
    def _co_indexed(self):
        _check_parallel("conformer", x=self.x, y=self.y)
        return self

    def point(self, index: int) -> Tuple[float, float]:
        return self.x[index], self.y[index]

    def __len__(self):
        return len(self.x)


class CoordinateSet(_Record):
    conformers: Tuple[Conformer, ...]
    # PubChem lists the atom ids each conformer's x/y arrays are indexed by
    aid: Optional[Tuple[Count, ...]] = None


# ===========================
# Properties
# ===========================

class Urn(_Record):
    datatype: Optional[Count] = None
    label: Optional[Text] = None
    name: Optional[Text] = None
    release: Optional[Text] = None
    software: Optional[Text] = None
    source: Optional[Text] = None
    version: Optional[Text] = None


class PropertyValue(_Record):
    fval: Optional[Real] = None
    ival: Optional[SignedInt] = None
    sval: Optional[Text] = None
    binary: Optional[Text] = None

    @property
    def value(self) -> Union[float, int, str, None]:
        for v in (self.fval, self.ival, self.sval, self.binary):
            if v is not None:
                return v
        return None


class Property(_Record):
    urn: Urn
    value: PropertyValue


# ===========================
# Stereo and names
# ===========================

class Tetrahedral(_Record):
    above: Count
    below: Count
    bottom: Count
    center: Count
    parity: Count
    top: Count
    kind: Count = Field(alias="type")


class Stereo(_Record):
    tetrahedral: Optional[Tetrahedral] = None


class IupacName(_Record):
    name: Optional[Text] = Field(default=None, alias="IUPACName")


# ===========================
# Compound
# ===========================

class Compound(_Record):
    cid: Optional[Count] = None
    atoms: Optional[AtomTable] = None
    bonds: Optional[Tuple[BondTable, ...]] = None
    coords: Optional[Tuple[CoordinateSet, ...]] = None
    props: Optional[Tuple[Property, ...]] = None
    stereo: Optional[Tuple[Stereo, ...]] = None
    molecular_formula: Optional[Text] = None
    molecular_weight: Optional[Real] = None
    inchi: Optional[Text] = None
    inchikey: Optional[Text] = None
    isomeric_smiles: Optional[Text] = None
    tpsa: Optional[Real] = None
    xlogp: Optional[Real] = None
    exact_mass: Optional[Real] = None
    complexity: Optional[Real] = None
    h_bond_donor_count: Optional[Count] = None
    h_bond_acceptor_count: Optional[Count] = None
    rotatable_bond_count: Optional[Count] = None
    heavy_atom_count: Optional[Count] = None
    charge: Optional[SignedInt] = None
    iupac: Optional[Tuple[IupacName, ...]] = None

    @model_validator(mode="before")
    @classmethod
    def _pubchem_cid(cls, data: Any) -> Any:
        # PubChem nests the cid as {"id": {"id": {"cid": ...}}}
        if isinstance(data, dict) and "cid" not in data:
            ident = data.get("id")
            if isinstance(ident, dict) and isinstance(ident.get("id"), dict):
                cid = ident["id"].get("cid")
                if cid is not None:
                    data = {**data, "cid": cid}
        return data

    @field_validator("bonds", mode="before")
    @classmethod
    def _single_bond_table(cls, v: Any) -> Any:
        # legacy shape: one bond-table object instead of a list of them
        if isinstance(v, dict):
            return [v]
        return v

    @property
    def first_conformer(self) -> Optional[Conformer]:
        if not self.coords or not self.coords[0].conformers:
            return None
        return self.coords[0].conformers[0]


COMPOUND_KEYS = frozenset(
    [field.alias or name for name, field in Compound.model_fields.items()] + ["id"]
)
