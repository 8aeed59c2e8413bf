"""Servicios del Core.

Por qué aquí:
- Orquestan el bind (parser -> coerción -> registro de campos -> credenciales
  -> validación) sin depender de la CLI ni de ficheros concretos.
"""
