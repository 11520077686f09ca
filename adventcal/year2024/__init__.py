"""Solvers for the 2024 puzzles and the calendar that maps days to them."""