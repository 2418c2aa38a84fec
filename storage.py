import os, json, logging, tempfile
from typing import Dict, Any, List

log = logging.getLogger(__name__)

Record = Dict[str, Any]


def ensure_dir(path: str):
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)


def read_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, payload) -> None:
    # temp file in the target dir so os.replace stays on one filesystem
    ensure_dir(path)
    fd, tmp = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=os.path.dirname(os.path.abspath(path)))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


class SiteStore:
    """Sites list and brand -> port matrix rows, mirrored to two JSON files.

    Every write replaces the whole file. Memory is updated first, so a failed
    write leaves the new data visible until the next restart.
    """

    def __init__(self, sites_path: str, matrices_path: str):
        self.sites_path = sites_path
        self.matrices_path = matrices_path
        self.sites: List[Record] = []
        self.matrices: Dict[str, List[Record]] = {}

    @property
    def site_count(self) -> int:
        return len(self.sites)

    @property
    def matrix_count(self) -> int:
        return len(self.matrices)

    def load(self) -> "SiteStore":
        if os.path.exists(self.sites_path):
            self.sites = read_json(self.sites_path)
            log.info("Loaded %d sites from %s", len(self.sites), self.sites_path)
        if os.path.exists(self.matrices_path):
            self.matrices = read_json(self.matrices_path)
            log.info("Loaded port matrices for %d brands", len(self.matrices))
        return self

    def replace_sites(self, records: List[Record]) -> int:
        self.sites = records
        write_json(self.sites_path, self.sites)
        return len(records)

    def set_matrix(self, brand: str, records: List[Record]) -> int:
        self.matrices[brand.strip()] = records
        write_json(self.matrices_path, self.matrices)
        return len(records)
