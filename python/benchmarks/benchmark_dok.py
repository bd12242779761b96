import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

# Ensure we can import sparsemat from source tree
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sparsemat.sparse import DOK  # noqa: E402


# ---------- Builders ----------


def build_scipy_coo(m: int, n: int, density: float, seed: int) -> Tuple[sp.coo_matrix, int]:
    rs = np.random.RandomState(seed)
    data_rvs = lambda s: rs.randint(-9, 10, size=s).astype(np.int64)
    A = sp.random(m, n, density=density, format="coo", random_state=rs, data_rvs=data_rvs)
    A.eliminate_zeros()
    return A, int(A.nnz)


def build_dok_from_scipy(A_scipy: sp.coo_matrix) -> DOK:
    out = DOK(A_scipy.shape[0], A_scipy.shape[1])
    for r, c, v in zip(A_scipy.row.tolist(), A_scipy.col.tolist(), A_scipy.data.tolist()):
        out.set(r, c, int(v))
    return out


# ---------- Timing helpers ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float]) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
    }


# ---------- Ops ----------


def run_matmul_naive(A: DOK, B: DOK) -> DOK:
    # full double scan over both entry sets, kept as the unindexed baseline
    out = DOK(A.rows, B.cols)
    for (r, k), v in A.items():
        for (k2, c), w in B.items():
            if k == k2:
                out.set(r, c, out.get(r, c) + v * w)
    return out


def validate(name: str, got: DOK, ref: sp.spmatrix) -> None:
    if not np.array_equal(got.toarray(), ref.toarray()):
        raise AssertionError(f"Validation failed: {name} vs scipy")


def main():
    p = argparse.ArgumentParser(description="DOK add/subtract/matmul benchmarks against scipy.sparse")
    p.add_argument("--m", type=int, default=400)
    p.add_argument("--n", type=int, default=400)
    p.add_argument("--k", type=int, default=400, help="Columns of the right matmul operand")
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeat", type=int, default=5)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--naive", action="store_true", help="Also time the unindexed matmul baseline")
    p.add_argument("--validate", action="store_true")
    args = p.parse_args()

    A_sp, nnz_a = build_scipy_coo(args.m, args.n, args.density, args.seed)
    B_sp, nnz_b = build_scipy_coo(args.m, args.n, args.density, args.seed + 7)
    R_sp, _ = build_scipy_coo(args.n, args.k, args.density, args.seed + 13)
    A_csr, B_csr, R_csr = A_sp.tocsr(), B_sp.tocsr(), R_sp.tocsr()
    A, B, R = build_dok_from_scipy(A_sp), build_dok_from_scipy(B_sp), build_dok_from_scipy(R_sp)

    cases = [
        ("add", lambda: A_csr + B_csr, lambda: A + B),
        ("sub", lambda: A_csr - B_csr, lambda: A - B),
        ("matmul", lambda: A_csr @ R_csr, lambda: A @ R),
    ]
    results: List[Dict[str, float]] = []
    for op, ref_fn, dok_fn in cases:
        stats = summarize("scipy:" + op, time_op(ref_fn, args.warmup, args.repeat))
        if stats:
            results.append(stats)
        stats = summarize("sparsemat:" + op, time_op(dok_fn, args.warmup, args.repeat))
        if stats:
            results.append(stats)
        if args.validate:
            validate(op, dok_fn(), ref_fn())

    if args.naive:
        stats = summarize("naive:matmul", time_op(lambda: run_matmul_naive(A, R), 0, 1))
        if stats:
            results.append(stats)
        if args.validate:
            validate("naive matmul", run_matmul_naive(A, R), A_csr @ R_csr)

    # ---- print summary ----
    print(
        f"DOK Benchmarks: m={args.m} n={args.n} k={args.k} density={args.density} nnz(A)={nnz_a} nnz(B)={nnz_b}"
    )
    for r in results:
        print(
            f"{r['name']:>20}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms"
        )


if __name__ == "__main__":
    main()
