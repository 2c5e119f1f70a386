"""Benchmark the move and terminal-check functions on random boards."""

import timeit
from typing import Callable, List

import numpy as np

from mergegrid import Board, Direction, apply_move, has_legal_move

generator = np.random.default_rng(42)


def generate_random_board(size: int = 4) -> Board:
    """Generate a random board."""
    cells = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    cells.flat[indices] = tile_values
    return Board(cells)


def time_function(func: Callable, args: List, number: int = 1000, repeat: int = 5) -> float:
    """Time the execution of a function, in milliseconds per call."""
    timer = timeit.Timer(lambda: func(*args))
    times = timer.repeat(repeat=repeat, number=number)
    return min(times) / number * 1000


def benchmark_apply_move(board_size: int = 4, num_boards: int = 100):
    """Benchmark the apply_move function over all directions."""
    boards = [generate_random_board(board_size) for _ in range(num_boards)]
    total_time = sum(time_function(apply_move, [board, direction]) for board in boards for direction in Direction)
    avg_time = total_time / (num_boards * len(Direction))
    print(f"Average time for apply_move (board size {board_size}x{board_size}): {avg_time:.3f} ms")


def benchmark_has_legal_move(board_size: int = 4, num_boards: int = 100):
    """Benchmark the has_legal_move function."""
    boards = [generate_random_board(board_size) for _ in range(num_boards)]
    total_time = sum(time_function(has_legal_move, [board]) for board in boards)
    avg_time = total_time / num_boards
    print(f"Average time for has_legal_move (board size {board_size}x{board_size}): {avg_time:.3f} ms")


if __name__ == "__main__":
    print("Benchmarking apply_move:")
    for size in [4, 6, 8]:
        benchmark_apply_move(board_size=size, num_boards=20)

    print("\nBenchmarking has_legal_move:")
    for size in [4, 6, 8]:
        benchmark_has_legal_move(board_size=size)
