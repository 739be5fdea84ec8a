# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Key event stages
# host level:
# stage 0: read characters from a terminal or a key script
# stage 1: map characters to calculator key events

# engine level:
# stage 2: edit the operand being typed
# stage 3: sequence operands and operators into results
