from minilisp.builtin.env_builtin import register, PRIMITIVES

__all__ = ["register", "PRIMITIVES"]
