import io
import contextlib
import unittest
from gfpm import finfield
from gfpm.finfield import FiniteField, State
from gfpm.errors import (FieldError, InvalidOrderError, NotIrreducibleError,
                         NoPrimitiveElementError)


class Arithmetic(unittest.TestCase):

    def setUp(self):
        self.f8 = FiniteField(2, 3)
        self.f8.set_irreducible([1, 0, 1, 1])  # 1 + x^2 + x^3
        self.f9 = FiniteField(3, 2)
        self.f9.set_irreducible([1, 0, 1])  # 1 + x^2
        self.f256 = FiniteField(2, 8)
        self.f256.set_irreducible([1, 1, 0, 1, 1, 0, 0, 0, 1])  # AES polynomial

    def test_construction(self):
        self.assertRaises(ValueError, FiniteField, 2, 0)
        self.assertRaises(TypeError, FiniteField, 2, 1.0)
        self.assertRaises(InvalidOrderError, FiniteField, 4, 2)
        F = FiniteField(3, 4)
        self.assertEqual(F.order, 81)
        self.assertEqual(F.characteristic, 3)
        self.assertEqual(F.ext_deg, 4)
        self.assertEqual(repr(F), 'GF(3^4)')
        self.assertIsNone(F.irreducible)
        self.assertIsNone(F.primitive)
        self.assertIs(F.state, State.UNINITIALIZED)
        self.assertRaises(FieldError, F.primitive_element)
        self.assertRaises(FieldError, F.is_primitive, [0, 1])
        self.assertRaises(FieldError, F.reduce, [0, 1])

    def test_set_irreducible(self):
        F = FiniteField(2, 3)
        self.assertRaises(ValueError, F.set_irreducible, [1, 1])
        self.assertRaises(ValueError, F.set_irreducible, [1, 0, 1, 1, 1])
        self.assertRaises(ValueError, F.set_irreducible, [1, 0, 2, 1])
        self.assertIs(F.state, State.UNINITIALIZED)
        F.set_irreducible([1, 0, 1, 1, 0])  # trimmed to degree 3
        self.assertIs(F.state, State.READY)
        self.assertEqual(F.irreducible, F.poly('x^3 + x^2 + 1'))
        self.assertEqual(F.irreducible.to_vector(4), '1011')
        self.assertRaises(FieldError, F.set_irreducible, [1, 1, 0, 1])

        F = FiniteField(2, 2)
        self.assertRaises(NotIrreducibleError, F.set_irreducible, [1, 0, 1], check=True)
        self.assertRaises(ValueError, F.set_irreducible, 'x^2 + 1', check=True)
        F.set_irreducible(F.poly('x^2 + x + 1'), check=True)
        self.assertEqual(F.irreducible, [1, 1, 1])

    def test_elements(self):
        self.assertEqual(list(finfield.elements(2, 2)), [[0, 0], [1, 0], [0, 1], [1, 1]])
        self.assertEqual(list(finfield.elements(3, 1)), [[0], [1], [2]])
        g = finfield.elements(3, 2)
        self.assertEqual(next(g), [0, 0])
        self.assertEqual(next(g), [1, 0])
        self.assertEqual(next(g), [2, 0])
        self.assertEqual(next(g), [0, 1])
        self.assertEqual(len(list(g)), 5)
        a = list(self.f8.elements())
        self.assertEqual(len(a), 8)
        self.assertEqual(len(set(a)), 8)
        self.assertTrue(a[0].is_zero())
        self.assertEqual(a, list(self.f8.elements()))

    def test_reduce(self):
        F = self.f8
        self.assertEqual(F.reduce('x^3'), [1, 0, 1])
        self.assertEqual(F('x^3'), F.poly([1, 0, 1]))
        self.assertEqual(F([1, 1]), F.poly('x + 1'))
        self.assertEqual(F('x^7'), 1)

    def test_gf8(self):
        F = self.f8
        g = F.primitive_element()
        self.assertEqual(F.multiplicative_order(g), 7)
        self.assertEqual(g, F.poly([0, 1]))
        self.assertEqual(g.to_vector(3), '010')
        self.assertEqual(F.primitive, g)
        self.assertIs(F.state, State.FOUND)
        self.assertEqual(F.primitive_element(), g)
        self.assertIsNot(F.primitive_element(), g)
        powers = {g.powmod(k, F.irreducible) for k in range(7)}
        self.assertEqual(powers, set(F.elements()) - {F.poly()})

    def test_gf3(self):
        for c0 in range(3):
            F = FiniteField(3, 1)
            F.set_irreducible([c0, 1])
            g = F.primitive_element()
            self.assertEqual(g, 2)
            self.assertEqual(F.multiplicative_order(g), 2)

    def test_gf2(self):
        F = FiniteField(2, 1)
        F.set_irreducible([1, 1])
        self.assertEqual(F.primitive_element(), 1)

    def test_gf9(self):
        F = self.f9
        self.assertEqual(F.multiplicative_order([2]), 2)
        self.assertEqual(F.multiplicative_order([0, 1]), 4)
        self.assertFalse(F.is_primitive(F.poly([0, 1])))
        g = F.primitive_element()
        self.assertEqual(g, F.poly('x + 1'))
        self.assertEqual(F.multiplicative_order(g), 8)

    def test_gf256(self):
        F = self.f256
        self.assertEqual(F.multiplicative_order([0, 1]), 51)
        g = F.primitive_element()
        self.assertEqual(g, F.poly([1, 1]))
        self.assertEqual(F.multiplicative_order(g), 255)

    def test_order(self):
        F = self.f8
        self.assertIsNone(F.multiplicative_order([]))
        self.assertEqual(F.multiplicative_order([1]), 1)
        for a in F.elements():
            if a:
                self.assertEqual(F.multiplicative_order(a), 1 if a == 1 else 7)
        self.assertFalse(F.is_primitive([]))
        self.assertFalse(F.is_primitive([1]))
        self.assertTrue(F.is_primitive([1, 1]))

    def test_verbose(self):
        F = FiniteField(2, 3)
        F.set_irreducible([1, 0, 1, 1])
        with contextlib.redirect_stdout(io.StringIO()) as out:
            g = F.primitive_element(verbose=True)
        self.assertEqual(g, self.f8.primitive_element())
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[:3], ['P^1 mod f(x) = 0', 'P^7 mod f(x) = 0', '----------------'])
        self.assertIn('P^1 mod f(x) = x', lines)
        self.assertEqual(lines[-3:], ['P^7 mod f(x) = 1', 'P is primitive!', '----------------'])

        with contextlib.redirect_stdout(io.StringIO()) as out:
            self.f9.primitive_element(all_degrees=True)
        self.assertEqual(out.getvalue(), '')

    def test_all_degrees(self):
        F = FiniteField(3, 2)
        F.set_irreducible([1, 0, 1])
        self.assertEqual(F.primitive_element(all_degrees=True), self.f9.primitive_element())

    def test_copies(self):
        F = FiniteField(3, 2)
        f = F.poly('x^2 + 1')
        F.set_irreducible(f)
        f.set_coeff(2, 0)
        self.assertEqual(F.irreducible.degree(), 2)
        g = F.primitive_element()
        g += 1
        self.assertEqual(g, F.poly('x + 2'))
        self.assertEqual(F.primitive_element(), F.poly('x + 1'))
        h = F.primitive
        h.set_coeff(0, 0)
        self.assertEqual(F.primitive, [1, 1])
        c = F.primitive[1]
        c += 1
        self.assertEqual(F.primitive, [1, 1])
        f = F.irreducible
        f.set_coeff(2, 0)
        self.assertEqual(F.irreducible.degree(), 2)
        self.assertEqual(F.irreducible, [1, 0, 1])
        self.assertEqual(F.multiplicative_order([0, 1]), 4)
        self.assertEqual(F.primitive_element(), F.poly('x + 1'))
        self.assertIs(F.state, State.FOUND)

    def test_exhausted(self):
        F = FiniteField(2, 2)
        F.set_irreducible([1, 0, 1])  # (1 + x)^2
        self.assertIsNone(F.multiplicative_order([0, 1]))  # x^2 = 1, but 2 does not divide 3
        self.assertRaises(NoPrimitiveElementError, F.primitive_element)
        self.assertRaises(ArithmeticError, F.primitive_element)
        self.assertIs(F.state, State.EXHAUSTED)
        self.assertIsNone(F.primitive)


if __name__ == "__main__":
    unittest.main()
