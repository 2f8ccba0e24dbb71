import sys
from pathlib import Path

src = import_base = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src)) if str(src) not in sys.path else None
