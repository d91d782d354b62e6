"""Tests for LOCM Bot"""
