import sys
import time
from pathlib import Path

import ouiserve


def main() -> None:
    source = sys.argv[1] if len(sys.argv) > 1 else str(
        Path(__file__).resolve().parents[1] / "tests" / "assets" / "oui_sample.txt"
    )
    server = ouiserve.run(port=3000, source=source)

    for mac in ("ac:de:48:11:22:33", "F4-F5-D8-00-00-01", "00000c123456", "not-a-mac"):
        vendor = server.resolve_vendor(mac)
        print(f"{mac:>20} -> {vendor or '(unknown)'}")

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
