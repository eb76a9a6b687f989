# pugplot/settings.py
from dataclasses import dataclass
from pathlib import Path

PUBCHEM_NAME_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug/compound/name"
RETURN_TYPE = "/JSON"
PNG_DIR = Path("png_out")
TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    """Endpoint, output directory and transport timeout for one run."""

    base_url: str = PUBCHEM_NAME_URL
    suffix: str = RETURN_TYPE
    out_dir: Path = PNG_DIR
    timeout: float = TIMEOUT
