#!/usr/bin/env python
"""
Workout tracker CLI runner.

Usage:
    python run.py demo                                  # sample workouts
    python run.py calc running --actions 5000 --minutes 30 --weight 85
    python run.py report data/workouts.csv              # reports + totals
    python run.py export data/workouts.csv -o output    # export to json
    python run.py visualize data/workouts.csv           # generate charts
"""

import sys
from pathlib import Path

# add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from tracker.main import main

if __name__ == "__main__":
    main()
