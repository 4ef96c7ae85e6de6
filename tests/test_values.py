import math
import unittest

from ion.tree_walker.values import (
	NULL, NullValue, BoolValue, NumberValue, StringValue, ObjectValue,
	make_null, make_bool, make_number, make_string, make_object, render_number,
)

class ConstructorTests(unittest.TestCase):

	def test_null_is_a_singleton(self):
		self.assertIs(NULL, make_null())
		self.assertIs(NULL, NullValue())
		self.assertFalse(NULL)
		self.assertEqual("null", str(NULL))

	def test_numbers_are_floats(self):
		n = make_number(3)
		self.assertIsInstance(n.value, float)
		self.assertEqual(NumberValue(3.0), n)

	def test_huge_integers_become_infinite(self):
		self.assertEqual(math.inf, make_number(10**400).value)
		self.assertEqual(-math.inf, make_number(-10**400).value)
		self.assertEqual("Infinity", str(make_number(10**400)))

	def test_payload_types_are_checked(self):
		for bogon in [
			lambda: make_number(True),
			lambda: make_number("3"),
			lambda: make_bool(1),
			lambda: make_string(3),
			lambda: make_object([(1, make_number(1))]),
			lambda: make_object([("a", 1)]),
		]:
			with self.subTest(bogon):
				self.assertRaises(TypeError, bogon)

	def test_kinds_do_not_compare_equal(self):
		self.assertNotEqual(make_number(1), make_bool(True))
		self.assertNotEqual(make_string("1"), make_number(1))
		self.assertEqual(make_bool(False), make_bool(False))
		self.assertEqual(len({make_number(2), make_number(2.0), make_string("2")}), 2)

	def test_scalars_are_immutable(self):
		n = make_number(1)
		with self.assertRaises(AttributeError):
			n.value = 2
		self.assertEqual(1.0, n.value)

	def test_kind_tags(self):
		self.assertEqual(
			["null", "bool", "number", "string", "object"],
			[v.kind for v in (NULL, make_bool(True), make_number(0), make_string(""), make_object())],
		)

class ObjectTests(unittest.TestCase):

	def test_insertion_order_is_kept(self):
		obj = make_object([("b", make_number(1)), ("a", make_number(2)), ("c", make_number(3))])
		self.assertEqual(["b", "a", "c"], obj.keys())
		self.assertEqual("a", obj.key_at(1))

	def test_repeated_key_keeps_first_position_and_last_value(self):
		obj = make_object([("a", make_number(1)), ("b", make_number(2)), ("a", make_number(3))])
		self.assertEqual(["a", "b"], obj.keys())
		self.assertEqual(make_number(3), obj.value["a"])

	def test_accepts_a_mapping(self):
		obj = make_object({"x": NULL})
		self.assertIsInstance(obj, ObjectValue)
		self.assertIs(NULL, obj.value["x"])

	def test_key_at_refuses_negative_positions(self):
		obj = make_object({"x": NULL})
		self.assertRaises(IndexError, obj.key_at, -1)
		self.assertRaises(IndexError, obj.key_at, 1)

	def test_objects_compare_by_identity(self):
		self.assertNotEqual(make_object(), make_object())

class RenderTests(unittest.TestCase):

	def test_numbers(self):
		for n, text in [
			(7.0, "7"), (-2.0, "-2"), (3.5, "3.5"), (0.1, "0.1"),
			(math.inf, "Infinity"), (-math.inf, "-Infinity"), (math.nan, "NaN"),
			(1e21, "1e+21"),
		]:
			with self.subTest(n):
				self.assertEqual(text, render_number(n))

	def test_scalars(self):
		self.assertEqual("true", str(BoolValue(True)))
		self.assertEqual("false", str(make_bool(False)))
		self.assertEqual("hi", str(StringValue("hi")))

	def test_objects(self):
		inner = make_object({"z": make_bool(True)})
		obj = make_object({"a": make_number(1), "b": make_string("x"), "c": inner, "d": NULL})
		self.assertEqual('{ a: 1, b: "x", c: { z: true }, d: null }', str(obj))
		self.assertEqual("{}", str(make_object()))

if __name__ == '__main__':
	unittest.main()
