import unittest

from basetype import dispatch
from basetype.primitive import UnknownTypeTag

class ModeTests(unittest.TestCase):

	def test_mode(self):
		for tag, mode in [
			("double", "numeric"),
			("integer", "numeric"),
			("closure-function", "function"),
			("builtin", "function"),
			("symbol", "name"),
			("call-expression", "call"),
			("null", "NULL"),
			("argument-list", "pairlist"),
			("character", "character"),
		]:
			with self.subTest(tag):
				self.assertEqual(mode, dispatch.mode_of(tag))

	def test_storage_mode(self):
		for tag, mode in [
			("double", "double"),
			("integer", "integer"),
			("special", "function"),
			("symbol", "symbol"),
			("call-expression", "language"),
		]:
			with self.subTest(tag):
				self.assertEqual(mode, dispatch.storage_mode_of(tag))

	def test_unknown(self):
		with self.assertRaises(UnknownTypeTag):
			dispatch.mode_of("bogus")

class ClassTests(unittest.TestCase):

	def test_implicit_class(self):
		for tag, attrs, expect in [
			("double", {}, ("double", "numeric")),
			("integer", {"dimension": [2, 2]}, ("matrix", "array", "integer", "numeric")),
			("character", {"dimension": [2, 2, 2]}, ("array", "character")),
			("character", {"dimension": []}, ("character",)),
			("closure", {}, ("function",)),
			("symbol", {}, ("name",)),
			("environment", {}, ("environment",)),
		]:
			with self.subTest(tag=tag, attrs=attrs):
				self.assertEqual(expect, dispatch.implicit_class(tag, attrs))

	def test_class_of(self):
		for tag, attrs, expect in [
			("double", {}, ("numeric",)),
			("integer", {}, ("integer",)),
			("builtin", {}, ("function",)),
			("call-expression", {}, ("call",)),
			("null", {}, ("NULL",)),
			("double", {"dim": [3, 3]}, ("matrix", "array")),
			("double", {"dimension": []}, ("numeric",)),
			("integer", {"class": ["ordered", "factor"]}, ("ordered", "factor")),
			("list", {"class": "data.frame", "dimension": [2, 2]}, ("data.frame",)),
		]:
			with self.subTest(tag=tag, attrs=attrs):
				self.assertEqual(expect, dispatch.class_of(tag, attrs))

	def test_object_kind(self):
		self.assertEqual(dispatch.BASE, dispatch.object_kind("double"))
		self.assertEqual(dispatch.BASE, dispatch.object_kind("double", {"dimension": [2, 2]}))
		self.assertEqual(dispatch.S3, dispatch.object_kind("integer", {"class": "factor"}))
		self.assertEqual(dispatch.S4, dispatch.object_kind("S4-instance", {"class": "Person"}))
		self.assertEqual(dispatch.S4, dispatch.object_kind("list", {"class": "Money", "S4": True}))

if __name__ == '__main__':
	unittest.main()
