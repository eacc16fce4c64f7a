"""
Command line tools.

Usage:
    python -m blocklens.cli.main project --goal-race 10k --goal-time 45:00
        --recent-race 5k --recent-time 21:30
"""
