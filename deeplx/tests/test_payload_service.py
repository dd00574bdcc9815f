"""
/**
 * @file deeplx/tests/test_payload_service.py
 * @description 请求合成器单元测试（id 区间、时间戳、method 空格规则、字节级请求体）。
 */
"""

import json
import random
import unittest
from unittest.mock import MagicMock

from deeplx.services.payload_service import (
    REQUEST_ID_MAX,
    REQUEST_ID_MIN,
    EncodingError,
    build_payload,
    derive_timestamp,
    generate_request_id,
    use_spaced_method,
)


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def fixed_clock(ms):
    return lambda: ms


class TestRequestId(unittest.TestCase):
    def test_draws_from_full_range(self):
        rng = MagicMock()
        rng.randint.return_value = 123456789
        self.assertEqual(generate_request_id(rng), 123456789)
        rng.randint.assert_called_once_with(100_000_000, 199_999_999)

    def test_seeded_draws_stay_in_range(self):
        rng = random.Random(42)
        for _ in range(500):
            value = generate_request_id(rng)
            self.assertGreaterEqual(value, REQUEST_ID_MIN)
            self.assertLessEqual(value, REQUEST_ID_MAX)


class TestTimestamp(unittest.TestCase):
    def test_no_i_keeps_raw_time(self):
        self.assertEqual(derive_timestamp("Hello", 1700000000123), 1700000000123)
        self.assertEqual(derive_timestamp("", 1700000000123), 1700000000123)

    def test_uppercase_i_is_not_counted(self):
        self.assertEqual(derive_timestamp("I", 1700000000123), 1700000000123)

    def test_rounds_up_by_i_count(self):
        # one "i": step 2
        self.assertEqual(derive_timestamp("Hi", 1700000000001), 1700000000002)
        # already aligned still moves forward one step
        self.assertEqual(derive_timestamp("Hi", 1700000000000), 1700000000002)
        # four "i": step 5
        self.assertEqual(derive_timestamp("mississippi", 1700000000003), 1700000000005)

    def test_deterministic_for_fixed_now(self):
        text = "this is a line with six i"
        self.assertEqual(derive_timestamp(text, 1712345678901), derive_timestamp(text, 1712345678901))


class TestMethodSpacing(unittest.TestCase):
    CASES = [
        (100000028, True),   # (id+5) % 29 == 0
        (100000002, True),   # (id+5) % 29 == 3
        (100000001, True),   # (id+3) % 13 == 0
        (100000014, True),   # (id+3) % 13 == 0
        (100000000, False),
        (100000003, False),
        (199999999, False),
    ]

    def test_predicate_table(self):
        for request_id, spaced in self.CASES:
            with self.subTest(request_id=request_id):
                self.assertEqual(use_spaced_method(request_id), spaced)

    def test_payload_uses_matching_variant(self):
        for request_id, spaced in self.CASES:
            with self.subTest(request_id=request_id):
                body = build_payload("Hello", "", "", rng=FixedRng(request_id), clock=fixed_clock(1))
                if spaced:
                    self.assertIn('"method" : "LMT_handle_texts"', body)
                    self.assertNotIn('"method": "', body)
                else:
                    self.assertIn('"method": "LMT_handle_texts"', body)
                    self.assertNotIn('"method" : "', body)
                self.assertNotIn('"method":"', body)


class TestBuildPayload(unittest.TestCase):
    def test_exact_bytes_compact_variant(self):
        body = build_payload("Hello", "", "es", rng=FixedRng(100000000), clock=fixed_clock(1700000000000))
        expected = (
            '{"jsonrpc":"2.0","method": "LMT_handle_texts","id":100000000,'
            '"params":{"texts":[{"text":"Hello","requestAlternatives":3}],'
            '"timestamp":1700000000000,"splitting":"newlines",'
            '"lang":{"source_lang_user_selected":"AUTO","target_lang":"ES"}}}'
        )
        self.assertEqual(body, expected)

    def test_exact_bytes_spaced_variant(self):
        body = build_payload("Hi", "de", "fr", rng=FixedRng(100000001), clock=fixed_clock(1700000000001))
        expected = (
            '{"jsonrpc":"2.0","method" : "LMT_handle_texts","id":100000001,'
            '"params":{"texts":[{"text":"Hi","requestAlternatives":3}],'
            '"timestamp":1700000000002,"splitting":"newlines",'
            '"lang":{"source_lang_user_selected":"DE","target_lang":"FR"}}}'
        )
        self.assertEqual(body, expected)

    def test_language_defaults(self):
        body = build_payload("Hello", "", "", rng=FixedRng(100000000), clock=fixed_clock(1))
        lang = json.loads(body)["params"]["lang"]
        self.assertEqual(lang, {"source_lang_user_selected": "AUTO", "target_lang": "EN"})

    def test_languages_upper_cased(self):
        body = build_payload("Hello", "en", "zh", rng=FixedRng(100000000), clock=fixed_clock(1))
        lang = json.loads(body)["params"]["lang"]
        self.assertEqual(lang["source_lang_user_selected"], "EN")
        self.assertEqual(lang["target_lang"], "ZH")

    def test_non_ascii_text_is_not_escaped(self):
        body = build_payload("Qué tal", "", "", rng=FixedRng(100000000), clock=fixed_clock(1))
        self.assertIn('"text":"Qué tal"', body)

    def test_method_like_text_is_left_alone(self):
        text = '"method":"x"'
        body = build_payload(text, "", "", rng=FixedRng(100000000), clock=fixed_clock(1))
        self.assertEqual(json.loads(body)["params"]["texts"][0]["text"], text)

    def test_uses_random_draw_once(self):
        rng = FixedRng(150000000)
        body = build_payload("Hello", "", "", rng=rng, clock=fixed_clock(1))
        self.assertEqual(rng.calls, [(100_000_000, 199_999_999)])
        self.assertEqual(json.loads(body)["id"], 150000000)

    def test_unencodable_text_raises(self):
        with self.assertRaises(EncodingError):
            build_payload("\ud800", "", "", rng=FixedRng(100000000), clock=fixed_clock(1))

    def test_default_clock_is_milliseconds(self):
        body = build_payload("Hello", "", "", rng=FixedRng(100000000))
        # 2001-09-09 in ms; seconds would be far smaller
        self.assertGreater(json.loads(body)["params"]["timestamp"], 1_000_000_000_000)


if __name__ == "__main__":
    unittest.main()
