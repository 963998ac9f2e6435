"""
Digital pouch cost pipeline.

Pure Python math, no I/O. Given a DigitalCalcRequest and the operator's
DigitalGeneratorConfig, produce a DigitalCalcResult: geometry, press
revolutions, seven cost lines and a two-currency quote.
"""
