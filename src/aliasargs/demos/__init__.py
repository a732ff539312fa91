"""Example applications built with aliasargs"""
