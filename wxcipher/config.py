# wxcipher configuration
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Defaults for the command line flags in wxcipher.py.

# MQTT broker settings (public HiveMQ broker, MQTT over websockets)
MQTT_HOST = "broker.hivemq.com"
MQTT_PORT = 8000
MQTT_TRANSPORT = "websockets"   # or "tcp" (then usually port 1883)
MQTT_WS_PATH = "/mqtt"
MQTT_TOPIC = "home/esp32s3/pir/mouvement"
MQTT_QOS = 0
MQTT_KEEPALIVE = 60

# Reconnect backoff (seconds)
RECONNECT_MIN_S = 1
RECONNECT_MAX_S = 30

# Passphrase that unlocks the hidden message
REVEAL_SECRET = "Q-KEY"

# State painted at startup, before the first payload arrives
DEFAULT_CATEGORY = "sun"
DEFAULT_TEMP = 25

# Console commands
CMD_REVEAL = "m"
CMD_PAYLOAD = "p"
CMD_STATS = "s"
CMD_QUIT = "q"
REVEAL_PROMPT = "Entrez la clé pour décrypter le message: "
