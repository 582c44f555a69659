"""Hex parser strategies and the parser benchmark"""
