"""Proveedores de credenciales concretos.

Por qué un paquete:
- Agrupa un módulo por fuente (entorno, fichero de perfil, metadata EC2...).
- Cada módulo implementa `core.interfaces.credentials.CredentialsProvider`.

`BUILTIN_PROVIDERS` es lo que `default_registry()` registra: solo clases que
se pueden construir sin argumentos.
"""

from adapters.credentials.chain import CredentialsProviderChain, DefaultAWSCredentialsProviderChain
from adapters.credentials.environment import EnvironmentVariableCredentialsProvider
from adapters.credentials.instance_metadata import InstanceProfileCredentialsProvider
from adapters.credentials.profile import ProfileCredentialsProvider
from adapters.credentials.static import StaticCredentialsProvider

BUILTIN_PROVIDERS = {
	"DefaultAWSCredentialsProviderChain": DefaultAWSCredentialsProviderChain,
	"EnvironmentVariableCredentialsProvider": EnvironmentVariableCredentialsProvider,
	"InstanceProfileCredentialsProvider": InstanceProfileCredentialsProvider,
	"ProfileCredentialsProvider": ProfileCredentialsProvider,
}

__all__ = [
	"BUILTIN_PROVIDERS",
	"CredentialsProviderChain",
	"DefaultAWSCredentialsProviderChain",
	"EnvironmentVariableCredentialsProvider",
	"InstanceProfileCredentialsProvider",
	"ProfileCredentialsProvider",
	"StaticCredentialsProvider",
]
