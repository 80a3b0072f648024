#!/usr/bin/env python3
import argparse, sys, pathlib

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

from manifestcheck.config.settings import load_config_file
from manifestcheck.exceptions import ConfigError

def main():
    ap = argparse.ArgumentParser(description="Validate a manifestcheck YAML config file")
    ap.add_argument("--config", required=True)
    args = ap.parse_args()
    cfg_path = pathlib.Path(args.config)
    try:
        load_config_file(str(cfg_path))
        print("[OK] Config valid:", cfg_path)
    except ConfigError as e:
        print("[ERROR] Config invalid:", e)
        sys.exit(2)

if __name__ == "__main__":
    main()
