# -*- coding: utf-8 -*-

"""
catdiag error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
NOT_COMPOSABLE = "{} does not compose with {}: {} != {}."
NOT_PARALLEL = "Expected parallel arrows, got {} and {} instead."
NOT_AN_OBJECT = "{} is not an object of {}."
MISSING_OB_MAP = "Object {} of {} is not mapped."
MISSING_HOM_MAP = "Generator {} of {} is not mapped."
MISSING_COMPONENT = "Component at {} is missing."
WRONG_HOM_IMAGE = "Expected {} to be mapped to an arrow {} -> {}, got {}."
WRONG_COMPONENT = "Expected component at {} of type {} -> {}, got {}."
NOT_NATURAL = "Naturality square at {} does not commute: {} != {}."
INFINITE_HOM = "Hom-set from {} to {} is infinite, the generating graph "\
               "has a cycle."
KIND_MISMATCH = "Cannot compose a DiagramHom[{}] with a DiagramHom[{}]."
NO_DUAL = "{} has no dual, only kinds op and co are opposite to each other."
