"""Command line interface for javapkg"""
