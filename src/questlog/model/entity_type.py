# SPDX-License-Identifier: MIT


class EntityType:
    HABIT = "habit"
    LOG = "log"
