import time
import numpy as np
import cachematrix

def benchmark_cache_solve(n, iterations=10):
    print(f"\n--- Benchmarking cache_solve (N={n}) ---")

    # Diagonally dominant so the matrix is invertible
    a_np = np.random.rand(n, n)
    a_np += np.eye(n) * n

    # NumPy (no cache)
    start = time.perf_counter()
    for _ in range(iterations):
        res_np = np.linalg.inv(a_np)
    end = time.perf_counter()
    np_time = (end - start) / iterations
    print(f"NumPy inv:         {np_time:.6f} s")

    # First call solves
    cell = cachematrix.make_cache_matrix(a_np)
    start = time.perf_counter()
    res = cachematrix.cache_solve(cell)
    end = time.perf_counter()
    cold_time = end - start
    print(f"cache_solve cold:  {cold_time:.6f} s")

    # Later calls hit the cache
    start = time.perf_counter()
    for _ in range(iterations):
        res = cachematrix.cache_solve(cell)
    end = time.perf_counter()
    warm_time = (end - start) / iterations
    print(f"cache_solve warm:  {warm_time:.6f} s")

    speedup = np_time / warm_time if warm_time > 0 else 0
    print(f"Speedup (warm vs NumPy): {speedup:.1f}x")

    max_diff = np.max(np.abs(np.asarray(res) - res_np))
    print(f"Max |cached - numpy|: {max_diff:.3e}")

if __name__ == "__main__":
    for n in [64, 256, 1024]:
        benchmark_cache_solve(n)
