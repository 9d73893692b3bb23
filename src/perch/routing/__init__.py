"""Routing — ordered route table with segment-by-segment matching.

Routes are registered during setup and tried in registration order;
the first structural match wins.
"""
