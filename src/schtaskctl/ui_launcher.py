from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    try:
        from streamlit.web import cli as stcli  # type: ignore
    except ImportError:  # pragma: no cover
        print("Streamlit is not installed. Install with: pip install '.[ui]' ")
        return 1

    script_path = Path(__file__).resolve().with_name("ui_app.py")
    sys.argv = [
        "streamlit",
        "run",
        str(script_path),
        "--",
    ]
    return stcli.main()  # type: ignore


if __name__ == "__main__":
    raise SystemExit(main())
