import numpy as np

# proximal joints shared by every fixture; wrist sits at the bottom of the frame
WRIST = (0.5, 0.9)
INDEX_MCP = (0.45, 0.65)
JOINTS = {2: (0.40, 0.80), 6: (0.45, 0.55), 10: (0.50, 0.50), 14: (0.55, 0.55), 18: (0.60, 0.60)}
OPEN_TIPS = {4: (0.30, 0.70), 8: (0.45, 0.40), 12: (0.50, 0.35), 16: (0.55, 0.40), 20: (0.62, 0.50)}
CLOSED_TIPS = {4: (0.45, 0.82), 8: (0.47, 0.70), 12: (0.50, 0.70), 16: (0.53, 0.70), 20: (0.57, 0.75)}
THUMB_HIGH = (0.42, 0.50)

def fake_hand(open_tips=(), thumb=None):
    """Closed fist, with the listed tip indices moved to their open positions."""
    pts = np.zeros((21,3), dtype=float)
    pts[0,:2] = WRIST
    pts[5,:2] = INDEX_MCP
    for i, xy in JOINTS.items(): pts[i,:2] = xy
    for i, xy in CLOSED_TIPS.items(): pts[i,:2] = OPEN_TIPS[i] if i in open_tips else xy
    if thumb is not None: pts[4,:2] = thumb
    return pts

def open_hand(): return fake_hand(open_tips=(4,8,12,16,20))
def closed_fist(): return fake_hand()
def thumbs_up(): return fake_hand(thumb=THUMB_HIGH)
