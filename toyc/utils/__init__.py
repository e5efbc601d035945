"""Terminal and tooling helpers for toyc"""
