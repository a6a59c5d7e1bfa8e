""" orfScan command line tools """
from .translate import add_subparser_translate, translate
from .list_codes import add_subparser_list_codes, list_codes
