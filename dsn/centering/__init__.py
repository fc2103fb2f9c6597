"""
The dsn 'centering' implements horizontal centering of the content of a single viewport.

The idea is simple: given a desired width for the content (either a fixed number of columns, or a fraction of the
viewport), put equal amounts of blank margin to the left and right of it. The devil is in the details:

* The desired width may be expressed relative to the viewport itself, or relative to the whole frame. In the latter
  case a viewport that sits somewhere in the middle of the frame should not get the full margin on both sides; only the
  outer edges of the whole arrangement should be padded.

* Margins are applied to a live viewport that keeps changing shape. Every time the layout changes we first restore the
  margins that were there before we started, and only then compute and apply the new ones. That way an old margin never
  compounds with a new one, and turning centering off (or becoming ineligible) always brings back the pristine state.

* The user may nudge the margins per side (offsets and factors). These nudges are modelled as notes played on a small
  structure, just like the other dsns do it.

The pure parts live in this package (structure, clef, construct, utils); the stateful orchestration lives in
`centering.py` (the controller) and `margins.py` (the applier), which talk to a host through a small duck-typed
interface.
"""
