"""Quick start example for factorkit.

Run this script to exercise the sequencer, factorizer and reducer and test
the installation.
"""


def main():
    print("factorkit - Quick Start Demo")
    print("=" * 50)

    print("\n1. Producing primes one at a time...")
    from factorkit.core.sequencer import PrimeSequencer

    seq = PrimeSequencer()
    values = [seq.next_prime() for _ in range(10)]
    print(f"   First 10: {values}")
    print(f"   Memoized so far: {len(seq)} primes, next candidate {seq.cursor}")

    print("\n2. Factoring integers...")
    from factorkit.core.factorization import factorize, factor_exponents

    for n in [36, 360, 1_000_000_000, 1_000_000_001]:
        print(f"   {n:>13,} = {' * '.join(str(p) for p in factorize(n))}")
    print(f"   Exponents of 360: {factor_exponents(360)}")

    print("\n3. Testing factorization speed...")
    import time
    from factorkit.core.domain import U64_MAX

    start = time.perf_counter()
    factors = factorize(U64_MAX)
    elapsed = time.perf_counter() - start
    print(f"   2**64 - 1 = {factors} in {elapsed:.3f}s")

    print("\n4. Reducing fractions...")
    from factorkit.rational.reducer import gcd, reduce_fraction

    for a, b in [(24, 36), (13, 17), (136, 150), (18, 6)]:
        p, q = reduce_fraction(a, b)
        print(f"   {a}/{b}: gcd={gcd(a, b)}, reduced={p}/{q}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'factorkit --help' to see CLI options")
    print("  - Try 'factorkit factor --exponents 720720'")


if __name__ == "__main__":
    main()
