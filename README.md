# yolopost

This package has helpers for working with YOLO11 detection models. It turns an
image into a network input tensor. It turns the raw output of a detection head
into boxes, which you can then write out as label text or draw onto the image.

## Installation

```
pip install .
```

The package depends on `numpy` and `pillow`. To run the tests as well, install
it with `pip install .[test]`.

## Images

The image functions take `uint8` arrays of shape `(height, width, 3)` with the
channels in BGR order. If an image is empty, or is not an 8-bit 3-channel
array, the functions raise `ValueError`.

## Preparing an input tensor

```python
from yolopost.transforms import preprocess_image, resize_nearest

tensor = preprocess_image(image, (640, 640))   # (height, width)
```

`preprocess_image` does four things:

- It resizes the image with `resize_nearest`, which uses nearest-neighbour sampling.
- It reverses the channels from BGR to RGB.
- It lays the planes out in CHW order.
- It divides every value by 255.

The result is a flat `float32` array of length `3 * height * width`. You can
reshape it to `(1, 3, height, width)` for a model input.

`resize_nearest(image, out_h, out_w)` can also be used on its own. It returns a
`uint8` array of shape `(out_h, out_w, 3)`. If either output size is not
positive, it raises `ValueError`.

## Decoding the network output

```python
from yolopost.detection import process_detect_output

detections = process_detect_output(raw_output, class_num=1, image_size=640.0)
for det in detections:
    print(det.as_tuple())  # (x1, y1, x2, y2, confidence, class_id)
```

`process_detect_output(output, class_num=1, image_size=320.0)` reads its input
as a flat array laid out attribute by attribute. The order is all centre-x
values, then all centre-y values, then the widths, then the heights, and then
one row of scores per class. Decoding goes like this:

1. The coordinates are divided by `image_size` and converted to corner form.
2. The best class and its score are chosen for each candidate.
3. Candidates with a best score above 0.25 are kept.
4. The kept candidates are sorted by confidence, highest first.
5. Per-class non-maximum suppression is applied with an IoU threshold of 0.5.

`class_num` must be between 1 and 255; otherwise the function raises
`ValueError`.

The result is a list of `Detection` objects. A `Detection` is a frozen
dataclass with these fields:

- `x1`, `y1`, `x2`, `y2`: the box corners, in normalised coordinates.
- `confidence`: the score of the chosen class.
- `class_id`: the chosen class.

A `Detection` also has:

- a `box` property, which gives the four corners;
- `as_tuple()`, which gives all six values as a tuple;
- iteration, which yields the same six values as `as_tuple()`.

Two lower-level functions are also available:

- `calculate_iou(box1, box2)` gives the intersection over union of two
  `(x1, y1, x2, y2)` boxes. It returns `0.0` when the union is zero.
- `apply_nms(detections, iou_threshold)` does greedy suppression within each
  class. Where two detections overlap, the one earlier in the list is kept.

## Writing labels

```python
from yolopost.transforms import boxes_to_yolo_str

text = boxes_to_yolo_str(detections)
```

`boxes_to_yolo_str` takes any boxes of the form `(x1, y1, x2, y2, conf, class)`.
It writes one line per box:

```
<class> <cx> <cy> <w> <h>
```

The centre, width and height are written with seven decimals. The confidence
is not written.

## Drawing results

```python
from yolopost.render import uniform_color, render_inference_result

colors = uniform_color(1)
annotated = render_inference_result(image, detections, colors)
```

`uniform_color(n)` returns `n` fully saturated BGR colours. Their hues are
evenly spaced and are converted with `hsv_to_bgr(h, s, v)`, which takes 8-bit
HSV values with the hue in `0..180`.

`render_inference_result` returns an annotated copy of the image as a `uint8`
array; it does not change the input image. For each box it draws:

- an outline 4 pixels wide;
- a filled label showing the class id and the confidence to two decimals.

The box coordinates are taken as normalised and are scaled to the image size.
The colour for each box is `colors[class_id % len(colors)]`. Labels use
Pillow's default font.

## Timing

`yolopost.timing` has small helpers for timing stages of a pipeline:

- `time_point_now()` returns a monotonic time point in nanoseconds.
- `span_us(start, end)` returns the time between two time points in microseconds.
- `span_ms(start, end)` returns the time between two time points in milliseconds.

## What this package does not do

- It does not load or run models. You feed the tensor from `preprocess_image`
  to your own inference runtime, and pass that runtime's output to
  `process_detect_output`.
- It does not read or write image files. Load and save images with a library
  of your choice.
- It provides no command-line tool. It is used as a library only.