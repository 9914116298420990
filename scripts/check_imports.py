import sys
import traceback
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

print("Starting import test...")
try:
    from main import app
    print("Main app imported successfully.")

    from router.coords import router
    print("Coords router imported successfully.")

    from router.pois import router
    print("POI router imported successfully.")

    print("All checks passed.")
except Exception:
    traceback.print_exc()
    sys.exit(1)
