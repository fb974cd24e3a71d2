# -*- coding: utf-8 -*-

""" catdiag configuration. """

# Whether to check the naturality squares of every natural transformation.
CHECK_NATURALITY = False
