"""Turtle geometry with Logo heading semantics and a recording turtle."""