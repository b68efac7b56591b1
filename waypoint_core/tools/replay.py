import argparse, logging, sys
from waypoint_core.algo_core.core import CFG_ERRORS, DEFAULT_CFG_PATH, _load_cfg, _emit
from waypoint_core.algo_core.errors import SmootherError

logger = logging.getLogger(__name__)

def main(argv=None):
    ap = argparse.ArgumentParser(description="replay a waypoint list from a config file")
    ap.add_argument("--config", default=DEFAULT_CFG_PATH)
    args = ap.parse_args(argv)

    try:
        cfg = _load_cfg(args.config)
    except CFG_ERRORS as e:
        logging.basicConfig()
        logger.error("cannot load %s: %s", args.config, e)
        return 1
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))
    logger.info("replaying %d waypoints from %s", len(cfg.waypoints), args.config)

    try:
        smoothed = cfg.smooth()
    except SmootherError as e:
        logger.error("replay failed: %s", e)
        return 1
    _emit(smoothed)
    return 0

if __name__ == "__main__":
    sys.exit(main())
