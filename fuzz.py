#!/usr/bin/env python3
"""
Random fuzzer for the character reference decoder.
Generates reference-heavy and malformed text to test that decoding is total,
never drops content, and round-trips through escaping.
"""

import argparse
import random
import string
import sys
import time
import traceback

from htmlize import ENTITIES, escape_all_quotes, escape_attribute, escape_text, unescape, unescape_bytes

ENTITY_NAMES = sorted(key.decode("ascii") for key in ENTITIES)

SPECIAL_CHARS = [
    "\x00", "\x01", "\x0b", "\x0c", "\x0e", "\x0f", "\x7f",  # Control chars
    "\ufffd",  # Replacement character
    "\u00a0",  # Non-breaking space
    "\u2028", "\u2029",  # Line/paragraph separators
    "\u200b", "\u200c", "\u200d",  # Zero-width chars
    "\ufeff",  # BOM
    "\ud800", "\udfff",  # Lone surrogates
]

REFERENCES = [
    "&amp;", "&lt;", "&gt;", "&quot;", "&apos;", "&nbsp;",
    "&", "&amp", "&ampamp;", "&am", "&#", "&#x", "&#123", "&#x1f;",
    "&#xdeadbeef;", "&#99999999;", "&#-1;", "&#x;", "&unknown;",
    "&AMP;", "&AMP", "&LT", "&GT",
    "&times", "&timesb", "&timesb;", "&timesbar;", "&notit;",
    "&#0;", "&#x0;", "&#x0D;", "&#13;",  # Null and CR
    "&#128;", "&#x80;",  # C1 control range start
    "&#159;", "&#x9F;",  # C1 control range end
    "&#xD800;", "&#xDFFF;",  # Surrogate range
    "&#x10FFFF;", "&#x110000;",  # Max and over max codepoint
    "&#xFDD0;", "&#xFFFE;",  # Noncharacters
    "&#4294967295;", "&#4294967296;", "&#x100000000;",  # 32-bit boundary
    "&CounterClockwiseContourIntegral;",  # Longest entity name
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def fuzz_known_entity():
    """A real entity name, sometimes cut short or extended."""
    name = random.choice(ENTITY_NAMES)
    variant = random.random()
    if variant < 0.5:
        return name
    if variant < 0.7:
        return name.rstrip(";")
    if variant < 0.85:
        return name[: random.randint(1, len(name))]
    return name.rstrip(";") + random_string(1, 4) + random.choice(["", ";"])


def fuzz_numeric():
    """Numeric references with random digits, prefixes and terminators."""
    prefix = random.choice(["&#", "&#x", "&#X"])
    if prefix == "&#":
        digits = "".join(random.choices(string.digits, k=random.randint(0, 12)))
    else:
        digits = "".join(random.choices(string.hexdigits, k=random.randint(0, 10)))
    if random.random() < 0.05:
        # Past int()'s digit limit, with or without leading zeros.
        digits = random.choice(["0", "1"]) * random.randint(4000, 6000) + digits
    return prefix + digits + random.choice(["", ";", ";;", "z", " "])


def fuzz_bogus_reference():
    """Ampersands followed by junk."""
    junk = random.choice([
        random_string(0, 40),
        "".join(random.choices(string.punctuation, k=random.randint(0, 5))),
        "&" * random.randint(1, 5),
    ])
    return "&" + junk + random.choice(["", ";"])


def fuzz_text():
    """Plain text, possibly with odd characters."""
    parts = [random_string(0, 30)]
    if random.random() < 0.3:
        parts.append(random.choice(SPECIAL_CHARS))
    if random.random() < 0.3:
        parts.append(random.choice(["Björk", "Борис", "日本語", "\U0001f600", "<", ">", '"', "'"]))
    return "".join(parts)


def generate_fuzzed_text():
    """Generate a complete fuzzed input."""
    parts = []
    num_parts = random.randint(1, 30)
    for _ in range(num_parts):
        part_type = random.choices(
            [
                lambda: random.choice(REFERENCES),
                fuzz_known_entity,
                fuzz_numeric,
                fuzz_bogus_reference,
                fuzz_text,
            ],
            weights=[15, 25, 20, 10, 30],
        )[0]
        parts.append(part_type())
    return "".join(parts)


def check_properties(text):
    """Return a description of the first violated property, or None."""
    decoded = unescape(text)
    if not isinstance(decoded, str):
        return f"unescape returned {type(decoded).__name__}"

    if "&" not in text and decoded != text:
        return "text without '&' was modified"

    raw = text.encode("utf-8", "surrogatepass")
    if unescape_bytes(raw).decode("utf-8", "surrogatepass") != decoded:
        return "unescape and unescape_bytes disagree"

    for escape in (escape_text, escape_attribute, escape_all_quotes):
        if unescape(escape(text)) != text:
            return f"{escape.__name__} does not round-trip"

    return None


def run_fuzzer(target, num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against a decoder."""
    if seed is not None:
        random.seed(seed)

    if target == "htmlize":
        decode_fn = check_properties
    elif target == "html":
        import html

        decode_fn = lambda text: html.unescape(text) and None
    else:
        print(f"Unknown target: {target}")
        sys.exit(1)

    crashes = []
    violations = []
    hangs = []
    successes = 0

    print(f"Fuzzing {target} with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        text = generate_fuzzed_text()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            problem = decode_fn(text)
            elapsed = time.perf_counter() - start

            if problem:
                violations.append({"test_num": i, "text": text, "problem": problem})
                if verbose:
                    print(f"  VIOLATION: Test {i}: {problem}")
            elif elapsed > 5.0:
                hangs.append({"test_num": i, "text": text, "time": elapsed})
                if verbose:
                    print(f"  HANG: Test {i} took {elapsed:.2f}s")
            else:
                successes += 1

        except Exception as e:
            crashes.append({
                "test_num": i,
                "text": text,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")

    elapsed_total = time.time() - start_time

    print(f"\n{'='*60}")
    print(f"FUZZING RESULTS: {target}")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Violations:     {len(violations)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/elapsed_total:.1f}")

    if crashes:
        print(f"\n{'='*60}")
        print("CRASH DETAILS:")
        print(f"{'='*60}")
        for crash in crashes[:10]:
            print(f"\nTest #{crash['test_num']}:")
            print(f"  Text: {crash['text'][:200]!r}...")
            print(f"  Error: {crash['error']}")
        if len(crashes) > 10:
            print(f"\n... and {len(crashes) - 10} more crashes")

    if violations:
        print(f"\n{'='*60}")
        print("PROPERTY VIOLATIONS:")
        print(f"{'='*60}")
        for violation in violations[:10]:
            print(f"\nTest #{violation['test_num']}: {violation['problem']}")
            print(f"  Text: {violation['text'][:200]!r}...")

    if save_failures and (crashes or violations or hangs):
        filename = f"fuzz_failures_{target}_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8", errors="backslashreplace") as f:
            f.write(f"Fuzzing results for {target}\n")
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"Text:\n{crash['text']!r}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for violation in violations:
                f.write(f"=== VIOLATION #{violation['test_num']}: {violation['problem']} ===\n")
                f.write(f"Text:\n{violation['text']!r}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"Text:\n{hang['text']!r}\n\n")
        print(f"\nFailures saved to {filename}")

    return not (crashes or violations or hangs)


def main():
    parser = argparse.ArgumentParser(description="Fuzz the HTML character reference decoder")
    parser.add_argument(
        "--target", "-t",
        choices=["htmlize", "html"],
        default="htmlize",
        help="Decoder to fuzz (default: htmlize; 'html' is the standard library)",
    )
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed inputs (no decoding)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(repr(generate_fuzzed_text()))
            print()
        return

    success = run_fuzzer(
        args.target,
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
