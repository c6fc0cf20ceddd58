"""Launch the TreeMD preview app from a source checkout."""

import sys
from pathlib import Path


def main() -> None:
    # Ensure the src directory is on the path
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from TreeMD.launcher import launch_preview

    launch_preview(sys.argv[1:])


if __name__ == "__main__":
    main()
