""" orfScan util module """
from . import brute_force


PROG_NAME = 'orfScan-util'
