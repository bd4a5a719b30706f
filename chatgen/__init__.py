"""
Paquete `chatgen`: backend del cliente de chat / generación de imágenes.

Signup/login contra la tabla local `users` y dos proxies delgados hacia
las APIs de chat (Groq) y de imágenes.
"""
