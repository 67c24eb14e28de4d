# The name of the project
PROJECT_NAME = "stackforge"

# The environment variable for the directory where the stackforge data is saved
HOME_ENV_VAR = "STACKFORGE_HOME"

# The environment variable for the container build tool binary
DOCKER_ENV_VAR = "STACKFORGE_DOCKER"

# The project config file at the root of every project
PROJECT_CONFIG_FILE = ".stackforge-config.yaml"

# Directory under the stackforge home where build contexts are extracted
EXTRACT_DIR = "extract"

# The build recipe consumed by the container build tool
DOCKERFILE = "Dockerfile"

# Directory inside an extracted build context holding the project sources
USER_APP_DIR = "user-app"
