"""Root conftest - makes ``usaspending_research`` importable from a plain checkout."""
import sys
from pathlib import Path

_repo_root = Path(__file__).resolve().parent.parent

if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
