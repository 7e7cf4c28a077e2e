"""Core request pipeline for whatsup."""
