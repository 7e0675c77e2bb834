import sys
import time
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

# Add parent directory to path to import rigidtf
sys.path.insert(0, str(Path(__file__).parent.parent))

from rigidtf import Transform, Quaternion, Vector3, X_AX
import quantities as q


def run_operation(operations, points, num_runs=5):
    """Time each operation over a set of points."""
    tf = Transform(Vector3(1, 5, .5), Quaternion.from_axis_angle(X_AX, 45 * q.deg))
    vectors = [Vector3.from_array(p) for p in points]
    times = []

    for op in operations:
        start_time = time.time()
        for _ in range(num_runs):
            if op == 'Apply (per point)':
                for v in vectors:
                    tf * v
            elif op == 'Apply (batched)':
                tf.apply_points(points)
            elif op == 'Compose with inverse (N times)':
                for _ in range(len(points)):
                    tf * ~tf
            else:
                raise ValueError(f"Invalid operation: {op}")

        elapsed = (time.time() - start_time) / num_runs
        times.append(elapsed)
        print(f" {op}: avg time {elapsed:.6f}s")

    return times


def benchmark_operations(nmin=10, nmax=1e5, num_runs=5):
    """Benchmark transform operations for growing point counts."""
    operations = [
        'Apply (per point)',
        'Apply (batched)',
        'Compose with inverse (N times)',
    ]
    results = {
        'operations': operations,
        'times': [],
        'npoints': []
    }

    npoints = np.logspace(np.log10(nmin), np.log10(nmax), num=6, dtype=int)
    for num_points in npoints:
        results['npoints'].append(num_points)

        print(f"\nBenchmarking operations with {num_points} points...")
        points = np.random.rand(num_points, 3)
        results['times'].append(run_operation(operations, points, num_runs=num_runs))

    return results


def main():
    print("Starting transform operations benchmark...\n")

    results = benchmark_operations(num_runs=1)

    fig, ax = plt.subplots()
    times = np.array(results['times'])
    for i, op in enumerate(results['operations']):
        ax.loglog(results['npoints'], times[:, i], label=op)
    ax.set_xlabel('Number of Points')
    ax.set_ylabel('Time (s)')
    ax.set_title('Transform Operations Benchmark')
    ax.legend()

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
