from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Sensors:
    # Available: iOS 14.0+
    sensorkit_reader_allow: list[SensorKitReaderAllow] | None = plist_field(
        "com.apple.developer.sensorkit.reader.allow"
    )


class SensorKitReaderAllow(Enum):
    """SensorKit 可读取的传感器类型。"""

    ON_WRIST = "on-wrist"
    AMBIENT_LIGHT_SENSOR = "ambient-light-sensor"
    MOTION_ACCELEROMETER = "motion-accelerometer"
    MOTION_ROTATION_RATE = "motion-rotation-rate"
    VISITS = "visits"
    PEDOMETER = "pedometer"
    DEVICE_USAGE = "device-usage"
    MESSAGES_USAGE = "messages-usage"
    PHONE_USAGE = "phone-usage"
    KEYBOARD_METRICS = "keyboard-metrics"
