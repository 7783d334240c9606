## First sweep example for sweepcad
print("example1.py -- sweepcad frame and sweep example")
print('''
In this example, we round the corners of a polyline, generate frames
along it, and sweep a small box through them to build a bent bar.''')

from sweepcad.curves import round_corners
from sweepcad.engine import native
from sweepcad.frames import Orientation, path_frames, revolve_frames
from sweepcad.shapes import box, cylinder
from sweepcad.sweep import duplicate, sweep

# an L-shaped path with a filleted corner
path = [[0,0,0],[20,0,0],[20,20,5]]
smooth = round_corners(path,[0,6,0],mode='bezier',segments=6)

# frames that follow the averaged tangent, tapering from 1 to 0.5
frames = path_frames(smooth,Orientation.MIDDLE,scale=[1,0.5])

# sweep a thin centered square section through them
section = box([2,2,0.1],center=True)
bar = sweep(frames,section)

# a ring of posts around the origin
posts = duplicate(revolve_frames(5,angle=300,radius=15),cylinder(10,r=1))

print("rounded path points:",len(smooth))
print("frames:",len(frames))
print("hulls in bar:",native.count(bar,'hull'))
print("bar bounding box:",native.bbox(bar))
print("post ring bounding box:",native.bbox(posts))
