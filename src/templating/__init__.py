"""Template engine adapters for the interval humanizer."""
