# experiments/sanity_rollout.py
"""
Quick rollouts of DashEnv with two throwaway policies, printed one line per run.

  random     presses with probability 1/2 each decision (seeded RNG)
  heuristic  jumps when a spike is near; in the ship, lifts while low.
             The seed jitters its jump distance and ship floor, so each seed
             is a different (still deterministic) player.

  python -m experiments.sanity_rollout --seeds 1,2,3
  python -m experiments.sanity_rollout --policy heuristic --level levels/hard.json --csv /tmp/runs.csv
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from neondash.env.dash_env import DashEnv
from neondash.game.level import load_track

Policy = Callable[[np.ndarray], int]


def random_policy(seed: int) -> Policy:
    rng = np.random.RandomState(seed)
    return lambda _obs: int(rng.randint(0, 2))


def heuristic_thresholds(seed: Optional[int]) -> Tuple[float, float]:
    """(jump_at, ship_floor) for a seed; None gives the untuned midpoints."""
    if seed is None:
        return 0.2, 0.5
    rng = np.random.RandomState(seed)
    return float(rng.uniform(0.12, 0.28)), float(rng.uniform(0.4, 0.6))


def heuristic_policy(jump_at: float, ship_floor: float) -> Policy:
    def act(obs: np.ndarray) -> int:
        y_norm, mode, dist, spike = obs[0], obs[2], obs[3], obs[4]
        if mode >= 0.5:
            return 1 if y_norm > ship_floor else 0
        return 1 if (spike == 1.0 and dist < jump_at) else 0
    return act


def rollout(env: DashEnv, policy: Policy, seed: int, max_steps: int) -> Dict:
    obs, info = env.reset(seed=seed)
    steps, ret = 0, 0.0
    terminated = truncated = False
    while steps < max_steps and not (terminated or truncated):
        obs, r, terminated, truncated, info = env.step(policy(obs))
        ret += float(r)
        steps += 1
    return {
        "seed": seed,
        "steps": steps,
        "return": ret,
        "distance": float(info.get("distance", 0.0)),
        "completed": bool(info.get("completed", False)),
        "death_cause": info.get("death_cause") or "",
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="DashEnv sanity rollouts")
    ap.add_argument("--policy", choices=["random", "heuristic", "both"], default="both")
    ap.add_argument("--seeds", type=str, default="101,102,103,104,105")
    ap.add_argument("--level", type=Path, default=None, help="JSON course (default: stock course)")
    ap.add_argument("--frame-skip", type=int, default=4)
    ap.add_argument("--steps", type=int, default=10_000)
    ap.add_argument("--csv", type=Path, default=None, help="append one row per run")
    args = ap.parse_args(argv)

    seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    track = load_track(args.level) if args.level else None
    env = DashEnv(frame_skip=args.frame_skip, track=track)
    names = ["random", "heuristic"] if args.policy == "both" else [args.policy]

    rows = []
    try:
        for name in names:
            for seed in seeds:
                if name == "random":
                    policy = random_policy(10_000 + seed)
                else:
                    policy = heuristic_policy(*heuristic_thresholds(seed))
                row = {"policy": name, **rollout(env, policy, seed, args.steps)}
                rows.append(row)
                print(f"[{name}] seed={seed}  steps={row['steps']}  dist={row['distance']:.1f}  "
                      f"done={row['completed']}  cause={row['death_cause'] or '-'}")
    finally:
        env.close()

    if args.csv is not None and rows:
        new_file = not args.csv.exists()
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        with args.csv.open("a", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(rows[0]))
            if new_file:
                w.writeheader()
            w.writerows(rows)
        print(f"Wrote {len(rows)} rows to {args.csv}")
    return rows


if __name__ == "__main__":
    main()
