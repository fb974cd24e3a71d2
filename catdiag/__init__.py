# -*- coding: utf-8 -*-

""" catdiag: diagrams in finitely presented categories and their morphisms. """

__version__ = '0.1.0'

from catdiag import (
    cat,
    fincat,
    diagrams,
    utils,
    config,
    messages,
)

from catdiag.cat import Ob, Arrow, Box, Id, Category, Functor
from catdiag.fincat import FinCat, FinFunctor, FinTransformation
from catdiag.diagrams import Kind, Diagram, DiagramHom, DIAGRAMS, op
