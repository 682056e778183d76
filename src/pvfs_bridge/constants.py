"""Constants used throughout the pvfs bridge."""

# ============================================================================
# Schemes
# ============================================================================

PVFS_SCHEME = "pvfs"
S3A_SCHEME = "s3a"

# Connection types routed to the object-store binder
S3_TYPES = ("s3", "s3a", "s3n")
HCP_TYPE = "hcp"

# ============================================================================
# Object-store driver configuration keys
# ============================================================================

ACCESS_KEY = "fs.s3a.access.key"
SECRET_KEY = "fs.s3a.secret.key"
SESSION_TOKEN = "fs.s3a.session.token"
AWS_CREDENTIALS_PROVIDER = "fs.s3a.aws.credentials.provider"
ENDPOINT = "fs.s3a.endpoint"
SIGNING_ALGORITHM = "fs.s3a.signing-algorithm"
S3A_IMPL = "fs.s3a.impl"
SECURE_CONNECTIONS = "fs.s3a.connection.ssl.enabled"
MAX_ERROR_RETRIES = "fs.s3a.attempts.maximum"
S3_CLIENT_FACTORY_IMPL = "fs.s3a.s3.client.factory.impl"
PROXY_HOST = "fs.s3a.proxy.host"
PROXY_PORT = "fs.s3a.proxy.port"
BUFFER_DIR = "fs.s3.buffer.dir"

# ============================================================================
# Identifiers written into the configuration
# ============================================================================

DEFAULT_S3A_IMPL = "s3fs.S3FileSystem"
TEMPORARY_CREDENTIALS_PROVIDER = "pvfs_bridge.aws.credentials.TemporaryCredentialsProvider"
SELF_SIGNED_CLIENT_FACTORY = "pvfs_bridge.aws.client_factory.SelfSignedS3ClientFactory"

# Legacy S3 signer required by the content platform
HCP_SIGNER_TYPE = "S3SignerType"
