"""
Paquete Infra de Core.

Contiene infraestructura de logging. No importar modelos aquí: los filtros se
cargan durante la configuración de logging en settings.
"""
