import argparse
import datetime
import json
import sys
from pathlib import Path

import numpy as np
import yaml
from tqdm import tqdm

# --- bootstrap when run as a file (no PYTHONPATH needed) ---
try:
    from pointraster.registry import build  # noqa: F401
except ModuleNotFoundError:
    import pathlib
    sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from pointraster.bounds import DEFAULT_BOUNDS, check_bounds, parse_bounds
from pointraster.io_image import sanity_check, write_png
from pointraster.pipeline import PointPreview
from pointraster.registry import available, build

DEFAULT_WIDTH = 512

def load_config(path):
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def parse_params(items, ap):
    # KEY=VALUE, VALUE parsed as a YAML scalar/list ("3", "0.5", "[0.1,0.2]")
    params = {}
    for item in items:
        if "=" not in item:
            ap.error(f"--param expects KEY=VALUE, got '{item}'")
        k, v = item.split("=", 1)
        params[k.strip()] = yaml.safe_load(v)
    return params

def save_one(out_dir, stem, img, pts, save_npy):
    write_png(out_dir / f"{stem}.png", img)
    if save_npy:
        np.save(out_dir / f"{stem}.npy", pts)
    stats = sanity_check(img)
    if stats["all_background"]:
        print(f"[WARN] {stem}: no point landed inside the raster")
    return {"name": stem, "points": int(len(pts)),
            "foreground": stats["foreground"], "coverage": round(stats["coverage"], 4)}

def main(argv=None):
    ap = argparse.ArgumentParser(description="Render 2D point sets as square RGBA PNG previews")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--points", nargs="+", help="Point files (.npy, .bin, .txt, .csv, .xy)")
    src.add_argument("--gen", choices=available("gen"), help="Generate the point set instead of reading files")
    ap.add_argument("--param", action="append", default=[], metavar="KEY=VALUE",
                    help="Generator parameter, repeatable (e.g. --param n=5 --param d=4)")
    ap.add_argument("--config", help="YAML with render/generator sections")
    ap.add_argument("--width", type=int, default=None, help=f"Raster side in pixels (default {DEFAULT_WIDTH})")
    ap.add_argument("--bounds", nargs=4, type=float, default=None,
                    metavar=("XMIN", "XMAX", "YMIN", "YMAX"),
                    help="Coordinate rectangle mapped onto the raster (default -1 1 -1 1)")
    ap.add_argument("--edge", choices=available("edge"), default=None,
                    help="What to do with points outside the raster (default drop)")
    ap.add_argument("--out", required=True, help="Output directory for PNGs and meta.json")
    ap.add_argument("--save-npy", action="store_true", help="Save the rendered points as .npy alongside PNG")
    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    rcfg = cfg.get("render", {}) or {}
    gcfg = cfg.get("generator", {}) or {}

    width = args.width if args.width is not None else rcfg.get("width", DEFAULT_WIDTH)
    edge = args.edge or rcfg.get("edge", "drop")
    try:
        if args.bounds:
            bounds = check_bounds(args.bounds)
        elif isinstance(rcfg.get("bounds"), str):
            bounds = parse_bounds(rcfg["bounds"])  # "xmin,xmax,ymin,ymax"
        else:
            bounds = check_bounds(rcfg.get("bounds", DEFAULT_BOUNDS))
        pipe = PointPreview(width, bounds, edge)
    except (ValueError, KeyError) as e:
        ap.error(str(e))

    gen_name = None
    params = {}
    if args.points and args.param:
        ap.error("--param only applies to generated point sets, not --points")
    if not args.points:
        gen_name = args.gen or gcfg.get("name")
        if not gen_name:
            ap.error("nothing to render: pass --points, --gen, or a config with generator.name")
        if gen_name == gcfg.get("name"):
            params.update(gcfg.get("params", {}) or {})
    params.update(parse_params(args.param, ap))

    out_dir = Path(args.out); out_dir.mkdir(parents=True, exist_ok=True)
    results = []

    if args.points:
        files = [Path(p) for p in args.points]
        print(f"[INFO] {len(files)} point file(s) | width={pipe.width} bounds={tuple(bounds)} edge={edge}")
        for p in tqdm(files, desc="Rendering", unit="file", disable=len(files) < 2):
            if not p.is_file():
                print(f"[WARN] Missing points file {p}. Skipping.")
                continue
            try:
                img, pts = pipe.render_file(p)
            except ValueError as e:
                print(f"[WARN] {p}: {e}. Skipping.")
                continue
            results.append(save_one(out_dir, p.stem, img, pts, args.save_npy))
    else:
        if gen_name == "uniform":
            params.setdefault("bounds", list(bounds))
        try:
            gen = build("gen", gen_name, **params)
        except (KeyError, TypeError, ValueError) as e:
            ap.error(f"generator '{gen_name}': {e}")
        print(f"[INFO] generator={gen_name} params={params} | width={pipe.width} edge={edge}")
        try:
            img, pts = pipe.render_generated(gen)
        except ValueError as e:
            print(f"[WARN] {gen_name}: {e}")
        else:
            results.append(save_one(out_dir, gen_name, img, pts, args.save_npy))

    # Write meta.json (reproducibility)
    meta = {
        "created": datetime.datetime.now().isoformat(timespec="seconds"),
        "inputs": [str(Path(p).resolve()) for p in args.points] if args.points else None,
        "generator": gen_name,
        "params": params if gen_name else None,
        "config": str(Path(args.config).resolve()) if args.config else None,
        "width": pipe.width,
        "bounds": list(bounds),
        "edge": edge,
        "save_npy": bool(args.save_npy),
        "written": results,
    }
    (out_dir / "meta.json").write_text(json.dumps(meta, indent=2))

    total = len(args.points) if args.points else 1
    print(f"[DONE] Out: {out_dir} | wrote={len(results)}/{total} | width={pipe.width} edge={edge}")
    return 0 if results else 1

if __name__ == "__main__":
    sys.exit(main())
