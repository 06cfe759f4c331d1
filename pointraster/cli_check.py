import argparse
import sys
from pathlib import Path

# --- bootstrap when run as a file (no PYTHONPATH needed) ---
try:
    from pointraster.io_image import read_png  # noqa: F401
except ModuleNotFoundError:
    import pathlib
    sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from pointraster.io_image import read_png, sanity_check

def main(argv=None):
    ap = argparse.ArgumentParser(description="Sanity-check rendered point previews")
    ap.add_argument("--dir", required=True, help="Directory with rendered PNGs")
    args = ap.parse_args(argv)

    files = sorted(Path(args.dir).glob("*.png"))
    if not files:
        print(f"[WARN] No PNGs found in {args.dir}")
        return 1

    bad = 0
    for p in files:
        try:
            img = read_png(p)
        except FileNotFoundError:
            print(f"{p.name:24s}: [WARN] unreadable")
            bad += 1
            continue
        s = sanity_check(img)
        flag = ""
        if s["all_background"]:
            flag = "  [WARN] everything is background"
            bad += 1
        elif s["uniform"]:
            flag = "  [WARN] everything is equal"
        print(f"{p.name:24s}: {s['width']}x{s['height']} fg={s['foreground']:7d} "
              f"({s['coverage']:.3f}%) opaque={s['opaque']}{flag}")
    print("[OK]" if bad == 0 else f"[WARN] {bad}/{len(files)} image(s) are unreadable or have no foreground pixels.")
    return 0 if bad == 0 else 1

if __name__ == "__main__":
    sys.exit(main())
